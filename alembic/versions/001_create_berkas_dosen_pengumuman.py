"""create berkas, dosen and pengumuman tables

Revision ID: 001
Revises:
Create Date: 2025-10-20

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "berkas",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("filepath", sa.String(512), nullable=False),
        sa.Column("uploadat", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_table(
        "dosen",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("nama", sa.String(255), nullable=False),
        sa.Column("nik", sa.String(64), nullable=False, server_default=""),
        sa.Column("jenis_dosen", sa.String(100), nullable=False, server_default="Dosen Ilkom"),
        sa.Column("foto", sa.String(512), nullable=True),
    )
    op.create_index("ix_dosen_nama", "dosen", ["nama"])
    op.create_table(
        "pengumuman",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("file_path", sa.String(512), nullable=True),
        sa.Column("uploadat", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_pengumuman_uploadat", "pengumuman", ["uploadat"])


def downgrade() -> None:
    op.drop_index("ix_pengumuman_uploadat", table_name="pengumuman")
    op.drop_table("pengumuman")
    op.drop_index("ix_dosen_nama", table_name="dosen")
    op.drop_table("dosen")
    op.drop_table("berkas")
