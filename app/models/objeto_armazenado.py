from datetime import datetime, timezone
from app.extensions import db


class ObjetoArmazenado(db.Model):
    """
    Metadados de um arquivo no storage.
    O token entra na URL pública; um novo upload no mesmo caminho troca o token,
    então URLs antigas deixam de resolver.
    """
    __tablename__ = 'objetosArmazenados'

    path = db.Column(db.String(500), primary_key=True)  # relativo ao STORAGE_ROOT
    token = db.Column(db.String(32), nullable=False)
    mime = db.Column(db.String(100))
    size_bytes = db.Column(db.Integer)
    sha256 = db.Column(db.String(64))
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    def __repr__(self):
        return f'<ObjetoArmazenado {self.path}>'
