"""initial artwork schema

Revision ID: 3b1f0c9d2a71
Revises:
Create Date: 2026-09-28 10:14:52.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b1f0c9d2a71'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.String(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.String(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('project',
    sa.Column('id', sa.String(), nullable=False),
    sa.Column('name', sa.String(), nullable=False),
    *_timestamps(),
    sa.PrimaryKeyConstraint('id', name=op.f('pk_project'))
    )

    op.create_table('collection',
    sa.Column('id', sa.String(), nullable=False),
    sa.Column('project_id', sa.String(), nullable=False),
    sa.Column('name', sa.String(), nullable=False),
    *_timestamps(),
    sa.ForeignKeyConstraint(['project_id'], ['project.id'], name=op.f('fk_collection_project_id_project'), ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id', name=op.f('pk_collection')),
    sa.UniqueConstraint('project_id', 'name', name='uq_collection_project_name')
    )
    with op.batch_alter_table('collection', schema=None) as batch_op:
        batch_op.create_index('idx_collection_project', ['project_id'], unique=False)

    op.create_table('trait',
    sa.Column('id', sa.String(), nullable=False),
    sa.Column('project_id', sa.String(), nullable=False),
    sa.Column('collection_id', sa.String(), nullable=False),
    sa.Column('name', sa.String(), nullable=False),
    *_timestamps(),
    sa.ForeignKeyConstraint(['project_id'], ['project.id'], name=op.f('fk_trait_project_id_project'), ondelete='CASCADE'),
    sa.ForeignKeyConstraint(['collection_id'], ['collection.id'], name=op.f('fk_trait_collection_id_collection'), ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id', name=op.f('pk_trait')),
    sa.UniqueConstraint('collection_id', 'name', name='uq_trait_collection_name')
    )
    with op.batch_alter_table('trait', schema=None) as batch_op:
        batch_op.create_index('ix_trait_project_collection', ['project_id', 'collection_id'], unique=False)

    op.create_table('trait_value',
    sa.Column('id', sa.String(), nullable=False),
    sa.Column('trait_id', sa.String(), nullable=False),
    sa.Column('name', sa.String(), nullable=False),
    *_timestamps(),
    sa.ForeignKeyConstraint(['trait_id'], ['trait.id'], name=op.f('fk_trait_value_trait_id_trait'), ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id', name=op.f('pk_trait_value')),
    sa.UniqueConstraint('trait_id', 'name', name='uq_trait_value_trait_name')
    )
    with op.batch_alter_table('trait_value', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_trait_value_trait_value_trait_id'), ['trait_id'], unique=False)

    op.create_table('image_layer',
    sa.Column('id', sa.String(), nullable=False),
    sa.Column('project_id', sa.String(), nullable=False),
    sa.Column('collection_id', sa.String(), nullable=False),
    sa.Column('name', sa.String(), nullable=False),
    sa.Column('url', sa.Text(), nullable=True),
    sa.Column('bytes', sa.BigInteger(), nullable=False),
    sa.Column('trait_id', sa.String(), nullable=True),
    sa.Column('trait_value_id', sa.String(), nullable=True),
    *_timestamps(),
    sa.CheckConstraint('bytes >= 0', name=op.f('ck_image_layer_bytes_nonneg')),
    sa.ForeignKeyConstraint(['project_id'], ['project.id'], name=op.f('fk_image_layer_project_id_project'), ondelete='CASCADE'),
    sa.ForeignKeyConstraint(['collection_id'], ['collection.id'], name=op.f('fk_image_layer_collection_id_collection'), ondelete='CASCADE'),
    sa.ForeignKeyConstraint(['trait_id'], ['trait.id'], name=op.f('fk_image_layer_trait_id_trait'), ondelete='SET NULL'),
    sa.ForeignKeyConstraint(['trait_value_id'], ['trait_value.id'], name=op.f('fk_image_layer_trait_value_id_trait_value'), ondelete='SET NULL'),
    sa.PrimaryKeyConstraint('id', name=op.f('pk_image_layer'))
    )
    with op.batch_alter_table('image_layer', schema=None) as batch_op:
        batch_op.create_index('ix_image_layer_address', ['project_id', 'collection_id'], unique=False)
        batch_op.create_index('ix_image_layer_trait_id', ['trait_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table('image_layer', schema=None) as batch_op:
        batch_op.drop_index('ix_image_layer_trait_id')
        batch_op.drop_index('ix_image_layer_address')
    op.drop_table('image_layer')

    with op.batch_alter_table('trait_value', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_trait_value_trait_value_trait_id'))
    op.drop_table('trait_value')

    with op.batch_alter_table('trait', schema=None) as batch_op:
        batch_op.drop_index('ix_trait_project_collection')
    op.drop_table('trait')

    with op.batch_alter_table('collection', schema=None) as batch_op:
        batch_op.drop_index('idx_collection_project')
    op.drop_table('collection')

    op.drop_table('project')
