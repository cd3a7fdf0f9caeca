from app.extensions import db
from app.models.base import gerar_id, verificar_documento
from app.models.opcoes import FASES_ORDEM


class OrdemServico(db.Model):
    """
    Ordem de serviço: cliente + máquina + técnico, com fase, custos e datas.
    """
    __tablename__ = 'ordensDeServico'

    id = db.Column(db.String(36), primary_key=True, default=gerar_id)
    order_number = db.Column(db.String(50), nullable=False)
    customer_id = db.Column(db.String(36), nullable=False)
    equipment_id = db.Column(db.String(36), nullable=False)
    phase = db.Column(db.String(30), nullable=False, default='Pendente')
    technician_id = db.Column(db.String(36), nullable=False)
    nature_of_service = db.Column(db.String(200), nullable=False)
    vehicle_id = db.Column(db.String(36))

    estimated_labor_cost = db.Column(db.Float, nullable=False, default=0.0)
    actual_labor_cost = db.Column(db.Float)

    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)

    description = db.Column(db.Text, nullable=False)
    notes = db.Column(db.Text)

    def problemas(self):
        return verificar_documento(
            self,
            opcoes={'phase': FASES_ORDEM},
            numericos=('estimated_labor_cost', 'actual_labor_cost')
        )

    def to_dict(self):
        return {
            'id': self.id,
            'order_number': self.order_number,
            'customer_id': self.customer_id,
            'equipment_id': self.equipment_id,
            'phase': self.phase,
            'technician_id': self.technician_id,
            'nature_of_service': self.nature_of_service,
            'vehicle_id': self.vehicle_id,
            'estimated_labor_cost': self.estimated_labor_cost,
            'actual_labor_cost': self.actual_labor_cost,
            'start_date': self.start_date.isoformat() if self.start_date else None,
            'end_date': self.end_date.isoformat() if self.end_date else None,
            'description': self.description,
            'notes': self.notes
        }

    def __repr__(self):
        return f'<OrdemServico {self.order_number}>'
