from app.extensions import db
from app.models.base import gerar_id, verificar_documento
from app.models.opcoes import AUXILIAR_STATUS_OPCOES


class EquipamentoAuxiliar(db.Model):
    """
    Baterias, carregadores, berços, cabos...
    Pode estar vinculado a uma máquina (linked_equipment_id).
    """
    __tablename__ = 'equipamentosAuxiliares'

    id = db.Column(db.String(36), primary_key=True, default=gerar_id)
    name = db.Column(db.String(200), nullable=False)
    type = db.Column(db.String(100), nullable=False)
    serial_number = db.Column(db.String(100))
    status = db.Column(db.String(30), nullable=False, default='Disponível')
    linked_equipment_id = db.Column(db.String(36))
    notes = db.Column(db.Text)

    def problemas(self):
        return verificar_documento(self, opcoes={'status': AUXILIAR_STATUS_OPCOES})

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'type': self.type,
            'serial_number': self.serial_number,
            'status': self.status,
            'linked_equipment_id': self.linked_equipment_id,
            'notes': self.notes
        }

    def __repr__(self):
        return f'<EquipamentoAuxiliar {self.name}>'
