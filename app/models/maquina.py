from app.extensions import db
from app.models.base import gerar_id, verificar_documento
from app.models.opcoes import MAQUINA_STATUS_OPCOES, OPCOES_PROPRIEDADE


class Maquina(db.Model):
    """
    Empilhadeira / máquina da frota (própria ou de cliente).

    Guarda dados técnicos opcionais, valores de locação e até dois arquivos
    anexos (catálogo de peças e códigos de erro) referenciados por URL.
    """
    __tablename__ = 'equipamentos'

    CAMPOS_NUMERICOS = (
        'manufacture_year',
        'tower_open_height_mm', 'tower_closed_height_mm', 'nominal_capacity_kg',
        'battery_box_width_mm', 'battery_box_height_mm', 'battery_box_depth_mm',
        'monthly_rental_value', 'hour_meter',
    )

    id = db.Column(db.String(36), primary_key=True, default=gerar_id)
    brand = db.Column(db.String(100), nullable=False)
    model = db.Column(db.String(100), nullable=False)
    chassis_number = db.Column(db.String(100), unique=True, nullable=False)
    equipment_type = db.Column(db.String(100), nullable=False)
    manufacture_year = db.Column(db.Integer)
    operational_status = db.Column(db.String(30), nullable=False, default='Disponível')

    # Vínculos (referências "soltas", sem FK: excluir um cliente não mexe na máquina)
    customer_id = db.Column(db.String(36))
    owner_reference = db.Column(db.String(30))  # 'CUSTOMER_OWNED' ou id de empresa
    fleet_number = db.Column(db.String(50))

    # Dados técnicos
    tower_open_height_mm = db.Column(db.Float)
    tower_closed_height_mm = db.Column(db.Float)
    nominal_capacity_kg = db.Column(db.Float)
    battery_box_width_mm = db.Column(db.Float)
    battery_box_height_mm = db.Column(db.Float)
    battery_box_depth_mm = db.Column(db.Float)

    monthly_rental_value = db.Column(db.Float)
    hour_meter = db.Column(db.Float)
    notes = db.Column(db.Text)

    # Anexos
    parts_catalog_url = db.Column(db.String(500))
    error_codes_url = db.Column(db.String(500))

    def problemas(self):
        return verificar_documento(
            self,
            opcoes={
                'operational_status': MAQUINA_STATUS_OPCOES,
                'owner_reference': OPCOES_PROPRIEDADE,
            },
            numericos=self.CAMPOS_NUMERICOS,
            opcionais=('owner_reference',)
        )

    def to_dict(self):
        return {
            'id': self.id,
            'brand': self.brand,
            'model': self.model,
            'chassis_number': self.chassis_number,
            'equipment_type': self.equipment_type,
            'manufacture_year': self.manufacture_year,
            'operational_status': self.operational_status,
            'customer_id': self.customer_id,
            'owner_reference': self.owner_reference,
            'fleet_number': self.fleet_number,
            'tower_open_height_mm': self.tower_open_height_mm,
            'tower_closed_height_mm': self.tower_closed_height_mm,
            'nominal_capacity_kg': self.nominal_capacity_kg,
            'battery_box_width_mm': self.battery_box_width_mm,
            'battery_box_height_mm': self.battery_box_height_mm,
            'battery_box_depth_mm': self.battery_box_depth_mm,
            'monthly_rental_value': self.monthly_rental_value,
            'hour_meter': self.hour_meter,
            'notes': self.notes,
            'parts_catalog_url': self.parts_catalog_url,
            'error_codes_url': self.error_codes_url
        }

    def __repr__(self):
        return f'<Maquina {self.brand} {self.model} ({self.chassis_number})>'
