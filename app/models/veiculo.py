from app.extensions import db
from app.models.base import gerar_id, verificar_documento
from app.models.opcoes import VEICULO_STATUS_OPCOES


class Veiculo(db.Model):
    """Veículo de apoio usado pelos técnicos nos atendimentos."""
    __tablename__ = 'veiculos'

    id = db.Column(db.String(36), primary_key=True, default=gerar_id)
    model = db.Column(db.String(100), nullable=False)
    license_plate = db.Column(db.String(10), nullable=False)
    kind = db.Column(db.String(50), nullable=False)
    current_mileage = db.Column(db.Float, nullable=False, default=0.0)
    fuel_consumption = db.Column(db.Float, nullable=False, default=0.0)  # km/l
    cost_per_kilometer = db.Column(db.Float, nullable=False, default=0.0)
    registration_info = db.Column(db.String(200))
    status = db.Column(db.String(30), nullable=False, default='Disponível')

    def problemas(self):
        return verificar_documento(
            self,
            opcoes={'status': VEICULO_STATUS_OPCOES},
            numericos=('current_mileage', 'fuel_consumption', 'cost_per_kilometer')
        )

    def to_dict(self):
        return {
            'id': self.id,
            'model': self.model,
            'license_plate': self.license_plate,
            'kind': self.kind,
            'current_mileage': self.current_mileage,
            'fuel_consumption': self.fuel_consumption,
            'cost_per_kilometer': self.cost_per_kilometer,
            'registration_info': self.registration_info,
            'status': self.status
        }

    def __repr__(self):
        return f'<Veiculo {self.license_plate}>'
