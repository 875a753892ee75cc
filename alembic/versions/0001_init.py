"""init
Revision ID: 0001_init
Revises:
Create Date: 2026-10-17
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "tb_filial",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("nome", sa.String(length=200), nullable=False),
        sa.Column("endereco", sa.String(length=300), nullable=True),
        sa.Column("bairro", sa.String(length=120), nullable=True),
        sa.Column("cidade", sa.String(length=120), nullable=True),
        sa.Column("estado", sa.String(length=60), nullable=True),
        sa.Column("cep", sa.String(length=20), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("raio_geofence_metros", sa.Float(), nullable=True),
    )
    op.create_index("ix_tb_filial_cidade", "tb_filial", ["cidade"])
    op.create_index("ix_tb_filial_estado", "tb_filial", ["estado"])

    op.create_table(
        "tb_moto",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("placa", sa.String(length=10), nullable=False, unique=True),
        sa.Column("modelo", sa.String(length=120), nullable=False),
        sa.Column("marca", sa.String(length=120), nullable=False),
        sa.Column("ano", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(length=40), nullable=False),
        sa.Column("filial_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("tb_filial.id"), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("dt_criacao", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_tb_moto_status", "tb_moto", ["status"])
    op.create_index("ix_tb_moto_filial_id", "tb_moto", ["filial_id"])

    op.create_table(
        "tb_usuario",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("nome", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=200), nullable=False, unique=True),
        sa.Column("senha", sa.String(length=255), nullable=False),
        sa.Column("perfil", sa.String(length=30), nullable=False),
    )

    op.create_table(
        "tb_evento",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("moto_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("tb_moto.id"), nullable=False),
        sa.Column("tipo", sa.String(length=40), nullable=False),
        sa.Column("motivo", sa.String(length=400), nullable=False),
        sa.Column("data_hora", sa.DateTime(timezone=False), nullable=True),
        sa.Column("localizacao", sa.String(length=200), nullable=True),
    )
    op.create_index("ix_tb_evento_moto_id", "tb_evento", ["moto_id"])
    op.create_index("ix_tb_evento_data_hora", "tb_evento", ["data_hora"])

    op.create_table(
        "tb_agendamento",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("moto_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("tb_moto.id"), nullable=False),
        sa.Column("data_agendada", sa.DateTime(timezone=False), nullable=True),
        sa.Column("descricao", sa.String(length=400), nullable=False),
    )
    op.create_index("ix_tb_agendamento_moto_id", "tb_agendamento", ["moto_id"])
    op.create_index("ix_tb_agendamento_data_agendada", "tb_agendamento", ["data_agendada"])

def downgrade():
    op.drop_table("tb_agendamento")
    op.drop_table("tb_evento")
    op.drop_table("tb_usuario")
    op.drop_table("tb_moto")
    op.drop_table("tb_filial")
