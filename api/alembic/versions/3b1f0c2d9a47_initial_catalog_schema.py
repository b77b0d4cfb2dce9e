"""initial catalog schema: languages, categories, subcategories, items, translations

Revision ID: 3b1f0c2d9a47
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
import sqlmodel  # noqa: F401


# revision identifiers, used by Alembic.
revision = '3b1f0c2d9a47'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    ]


def _translation_table(table: str, owner_column: str, owner_table: str) -> None:
    op.create_table(
        table,
        *_timestamps(),
        sa.Column(owner_column, sa.Integer(), nullable=False),
        sa.Column('language_id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.ForeignKeyConstraint([owner_column], [f'{owner_table}.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['language_id'], ['language.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint(owner_column, 'language_id'),
    )


def upgrade() -> None:
    op.create_table(
        'language',
        *_timestamps(),
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('locale', sa.String(length=16), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_language_locale'), 'language', ['locale'], unique=True)

    op.create_table(
        'category',
        *_timestamps(),
        sa.Column('id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'sub_category',
        *_timestamps(),
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['category_id'], ['category.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_sub_category_category_id'), 'sub_category', ['category_id'], unique=False)

    op.create_table(
        'item',
        *_timestamps(),
        sa.Column('id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'item_sub_category',
        sa.Column('item_id', sa.Integer(), nullable=False),
        sa.Column('sub_category_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['item_id'], ['item.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['sub_category_id'], ['sub_category.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('item_id', 'sub_category_id'),
    )

    _translation_table('category_translation', 'category_id', 'category')
    _translation_table('sub_category_translation', 'sub_category_id', 'sub_category')
    _translation_table('item_translation', 'item_id', 'item')


def downgrade() -> None:
    op.drop_table('item_translation')
    op.drop_table('sub_category_translation')
    op.drop_table('category_translation')
    op.drop_table('item_sub_category')
    op.drop_table('item')
    op.drop_index(op.f('ix_sub_category_category_id'), table_name='sub_category')
    op.drop_table('sub_category')
    op.drop_table('category')
    op.drop_index(op.f('ix_language_locale'), table_name='language')
    op.drop_table('language')
