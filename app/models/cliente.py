from app.extensions import db
from app.models.base import gerar_id, formatar_endereco


class Cliente(db.Model):
    """
    Cliente atendido pela empresa (locação, venda e assistência).
    O endereço é guardado em partes para permitir o preenchimento via CEP.
    """
    __tablename__ = 'clientes'

    id = db.Column(db.String(36), primary_key=True, default=gerar_id)
    name = db.Column(db.String(200), nullable=False)
    cnpj = db.Column(db.String(20), nullable=False)
    email = db.Column(db.String(200), nullable=False)

    cep = db.Column(db.String(9))
    street = db.Column(db.String(200))
    number = db.Column(db.String(20))
    complement = db.Column(db.String(100))
    neighborhood = db.Column(db.String(100))
    city = db.Column(db.String(100))
    state = db.Column(db.String(2))

    preferred_technician = db.Column(db.String(200))
    notes = db.Column(db.Text)

    @property
    def address(self):
        return formatar_endereco(
            self.street, self.number, self.complement,
            self.neighborhood, self.city, self.state
        )

    def problemas(self):
        return []

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'cnpj': self.cnpj,
            'email': self.email,
            'cep': self.cep,
            'street': self.street,
            'number': self.number,
            'complement': self.complement,
            'neighborhood': self.neighborhood,
            'city': self.city,
            'state': self.state,
            'address': self.address,
            'preferred_technician': self.preferred_technician,
            'notes': self.notes
        }

    def __repr__(self):
        return f'<Cliente {self.name}>'
