from app.extensions import db
from app.models.base import gerar_id


class Tecnico(db.Model):
    __tablename__ = 'tecnicos'

    id = db.Column(db.String(36), primary_key=True, default=gerar_id)
    name = db.Column(db.String(200), nullable=False)
    employee_id = db.Column(db.String(50), nullable=False)  # Matrícula
    specialization = db.Column(db.String(200))

    def problemas(self):
        return []

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'employee_id': self.employee_id,
            'specialization': self.specialization
        }

    def __repr__(self):
        return f'<Tecnico {self.name}>'
