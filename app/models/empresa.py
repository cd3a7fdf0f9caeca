from app.extensions import db
from app.models.base import verificar_documento, formatar_endereco
from app.models.opcoes import EMPRESA_IDS


class Empresa(db.Model):
    """
    Uma das três empresas do grupo. O id é fixo ('goldmaq', 'goldcomercio', 'goldjob').
    """
    __tablename__ = 'empresas'

    id = db.Column(db.String(20), primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    cnpj = db.Column(db.String(20), nullable=False)

    cep = db.Column(db.String(9))
    street = db.Column(db.String(200))
    number = db.Column(db.String(20))
    complement = db.Column(db.String(100))
    neighborhood = db.Column(db.String(100))
    city = db.Column(db.String(100))
    state = db.Column(db.String(2))

    # Dados bancários
    bank_name = db.Column(db.String(100))
    bank_agency = db.Column(db.String(20))
    bank_account = db.Column(db.String(30))
    bank_pix_key = db.Column(db.String(100))

    def problemas(self):
        return verificar_documento(self, opcoes={'id': EMPRESA_IDS})

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'cnpj': self.cnpj,
            'cep': self.cep,
            'street': self.street,
            'number': self.number,
            'complement': self.complement,
            'neighborhood': self.neighborhood,
            'city': self.city,
            'state': self.state,
            'address': formatar_endereco(
                self.street, self.number, self.complement, self.neighborhood,
                self.city, self.state, self.cep, padrao='Não fornecido'
            ),
            'bank_name': self.bank_name,
            'bank_agency': self.bank_agency,
            'bank_account': self.bank_account,
            'bank_pix_key': self.bank_pix_key
        }

    def __repr__(self):
        return f'<Empresa {self.id}: {self.name}>'
