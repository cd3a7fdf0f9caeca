import logging

from flask import Flask
from app.config import Config, validar_configuracao
from app.extensions import db, cors


def create_app(config_object=None, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.config.update(overrides)

    # Sem banco ou storage a aplicação não sobe
    validar_configuracao(app.config)

    logging.getLogger('goldmaq').setLevel(logging.DEBUG if app.debug else logging.INFO)

    db.init_app(app)
    cors.init_app(app)

    # --- IMPORTAR MODELOS ---
    # Precisam estar registrados no SQLAlchemy antes dos serviços e blueprints.
    from app import models  # noqa: F401

    # --- SERVIÇOS ---
    # Construídos uma vez por aplicação e injetados nas rotas via app.extensions.
    from app.services import montar_servicos
    app.extensions['goldmaq'] = montar_servicos(app.config, db)

    # --- REGISTRO DE ROTAS ---
    from app.api.rotas_entidades import blueprints_entidades
    from app.api.rotas_maquinas import maquinas_bp
    from app.api.rotas_empresas import empresas_bp
    from app.api.rotas_cep import cep_bp
    from app.api.rotas_arquivos import arquivos_bp
    from app.api.rotas_paginas import paginas_bp

    for bp in blueprints_entidades():
        app.register_blueprint(bp)
    app.register_blueprint(maquinas_bp)
    app.register_blueprint(empresas_bp)
    app.register_blueprint(cep_bp)
    # Downloads montados no caminho de STORAGE_PUBLIC_URL, o mesmo das URLs geradas
    app.register_blueprint(
        arquivos_bp, url_prefix=app.extensions['goldmaq'].armazenamento.prefixo_rota or None
    )
    app.register_blueprint(paginas_bp)

    return app
