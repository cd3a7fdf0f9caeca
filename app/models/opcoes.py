"""
Opções fixas do domínio: status, tipos, marcas e as três empresas do grupo.
Os valores são os mesmos gravados nos documentos.
"""

# --- Máquinas ---
MAQUINA_STATUS_OPCOES = ('Disponível', 'Locada', 'Em Manutenção', 'Sucata')
MAQUINA_STATUS_PADRAO = 'Disponível'

TIPOS_MAQUINA = (
    'Empilhadeira Contrabalançada GLP',
    'Empilhadeira Contrabalançada Elétrica',
    'Empilhadeira Contrabalançada Diesel',
    'Empilhadeira Retrátil',
    'Transpaleteira Elétrica',
    'Empilhadeira Patolada',
    'Selecionadora de Pedidos',
)

MARCAS_MAQUINA = (
    'Toyota', 'Hyster', 'Yale', 'Still', 'Linde', 'Clark', 'Mitsubishi', 'Nissan',
    'Komatsu', 'Crown', 'Raymond', 'Doosan', 'Hyundai', 'Caterpillar',
    'Jungheinrich', 'Hangcha', 'Heli', 'EP', 'Outra',
)

# Slots de arquivo da máquina: tipo -> campo com a URL
TIPOS_ANEXO = {
    'partsCatalog': 'parts_catalog_url',
    'errorCodes': 'error_codes_url',
}
ROTULOS_ANEXO = {
    'partsCatalog': 'catálogo de peças',
    'errorCodes': 'arquivo de códigos de erro',
}

# --- Equipamentos auxiliares ---
AUXILIAR_STATUS_OPCOES = ('Disponível', 'Locado', 'Em Manutenção', 'Sucata')
TIPOS_AUXILIAR = ('Bateria', 'Carregador', 'Berço', 'Cabo', 'Outro')

# --- Ordens de serviço ---
FASES_ORDEM = ('Pendente', 'Em Progresso', 'Aguardando Peças', 'Concluída', 'Cancelada')

# --- Veículos ---
VEICULO_STATUS_OPCOES = ('Disponível', 'Em Uso', 'Manutenção')

# --- Empresas do grupo ---
EMPRESAS = {
    'goldmaq': 'Gold Maq',
    'goldcomercio': 'Gold Comércio',
    'goldjob': 'Gold Empilhadeiras',
}
EMPRESA_IDS = tuple(EMPRESAS)

# Propriedade da máquina: cliente vinculado ou uma das empresas
OWNER_REF_CUSTOMER = 'CUSTOMER_OWNED'
OPCOES_PROPRIEDADE = EMPRESA_IDS + (OWNER_REF_CUSTOMER,)
