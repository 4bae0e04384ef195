"""Create photos, labels, photo_labels and albums tables

Revision ID: 001_moments_schema
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_moments_schema'
down_revision = None
branch_labels = None
depends_on = None

MEDIA_TYPES = ('PHOTO', 'VIDEO')
ALBUM_TYPES = ('ALBUM', 'FOLDER', 'MONTH', 'MOMENT')


def upgrade() -> None:
    """Create catalog and album tables."""
    op.create_table(
        'photos',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('photo_path', sa.String(500), nullable=False, server_default=''),
        sa.Column('photo_name', sa.String(255), nullable=False),
        sa.Column('media_type', sa.Enum(*MEDIA_TYPES, name='mediatype'), nullable=False),
        sa.Column('taken_at', sa.DateTime(), nullable=True),
        sa.Column('photo_year', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('photo_month', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('photo_country', sa.String(2), nullable=False, server_default='zz'),
        sa.Column('photo_state', sa.String(100), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_photos_path', 'photos', ['photo_path'])
    op.create_index('ix_photos_year_month', 'photos', ['photo_year', 'photo_month'])
    op.create_index('ix_photos_country_state', 'photos', ['photo_country', 'photo_state'])

    op.create_table(
        'labels',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('label_slug', sa.String(160), nullable=False, unique=True),
        sa.Column('label_name', sa.String(160), nullable=False),
    )

    op.create_table(
        'photo_labels',
        sa.Column('photo_id', sa.Integer(), sa.ForeignKey('photos.id'), primary_key=True),
        sa.Column('label_id', sa.Integer(), sa.ForeignKey('labels.id'), primary_key=True),
    )

    op.create_table(
        'albums',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('album_slug', sa.String(160), nullable=False),
        sa.Column('album_type', sa.Enum(*ALBUM_TYPES, name='albumtype'), nullable=False),
        sa.Column('album_title', sa.String(160), nullable=False),
        sa.Column('album_filter', sa.Text(), nullable=False, server_default=''),
        sa.Column('album_path', sa.String(500), nullable=False, server_default=''),
        sa.Column('album_year', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('album_month', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('album_country', sa.String(2), nullable=False, server_default='zz'),
        sa.Column('album_state', sa.String(100), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('album_slug', 'album_type', name='uq_albums_slug_type'),
    )
    op.create_index('ix_albums_type', 'albums', ['album_type'])


def downgrade() -> None:
    """Drop catalog and album tables."""
    op.drop_index('ix_albums_type', table_name='albums')
    op.drop_table('albums')
    op.drop_table('photo_labels')
    op.drop_table('labels')
    op.drop_index('ix_photos_country_state', table_name='photos')
    op.drop_index('ix_photos_year_month', table_name='photos')
    op.drop_index('ix_photos_path', table_name='photos')
    op.drop_table('photos')
