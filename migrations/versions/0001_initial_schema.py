"""Initial workspace schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('primary_email', sa.String(length=255), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('primary_email'),
    )

    op.create_table(
        'oauth_accounts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('provider', sa.Enum('GITHUB', 'GOOGLE', name='oauthprovider'), nullable=False),
        sa.Column('oauth_user_id', sa.String(length=255), nullable=False),
        sa.Column('oauth_email', sa.String(length=255), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )

    # Chat tables
    op.create_table(
        'chat_conversations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('model', sa.String(length=255), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_chat_conversations_user_id'), 'chat_conversations', ['user_id'])

    op.create_table(
        'chat_messages',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('chat_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('actor', sa.Enum('USER', 'ASSISTANT', name='messageactor'), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(['chat_id'], ['chat_conversations.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_chat_messages_chat_id'), 'chat_messages', ['chat_id'])

    op.create_table(
        'chat_conversation_files',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('chat_id', sa.Integer(), nullable=False),
        sa.Column('message_id', sa.Integer(), nullable=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('language', sa.String(length=50), nullable=False),
        sa.Column('extension', sa.String(length=20), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(['chat_id'], ['chat_conversations.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['message_id'], ['chat_messages.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_chat_conversation_files_chat_id'), 'chat_conversation_files', ['chat_id'])

    op.create_table(
        'chat_conversation_shares',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('chat_id', sa.Integer(), nullable=False),
        sa.Column('share_uuid', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('is_shared', sa.Boolean(), nullable=False),
        sa.Column('is_protected', sa.Boolean(), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(['chat_id'], ['chat_conversations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('chat_id'),
        sa.UniqueConstraint('share_uuid'),
    )

    # User-owned content
    op.create_table(
        'user_files',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('language', sa.String(length=50), nullable=False),
        sa.Column('extension', sa.String(length=20), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_files_user_id'), 'user_files', ['user_id'])

    op.create_table(
        'user_template_collections',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_shared', sa.Boolean(), nullable=False),
        sa.Column('share_uuid', postgresql.UUID(as_uuid=True), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('share_uuid'),
    )
    op.create_index(
        op.f('ix_user_template_collections_user_id'), 'user_template_collections', ['user_id']
    )

    op.create_table(
        'user_templates',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('collection_id', sa.Integer(), nullable=False),
        sa.Column('file_name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('language', sa.String(length=50), nullable=False),
        sa.Column('extension', sa.String(length=20), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(
            ['collection_id'], ['user_template_collections.id'], ondelete='CASCADE'
        ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_templates_collection_id'), 'user_templates', ['collection_id'])

    # Code-hosting installations
    op.create_table(
        'github_app_installations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('github_account_id', sa.Integer(), nullable=False),
        sa.Column('github_account_name', sa.String(length=255), nullable=True),
        sa.Column('github_account_type', sa.String(length=50), nullable=False),
        sa.Column('github_account_avatar_url', sa.String(length=500), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_github_app_installations_user_id'), 'github_app_installations', ['user_id']
    )

    op.create_table(
        'github_app_installation_repositories',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('installation_id', sa.Integer(), nullable=False),
        sa.Column('github_repository_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('size', sa.Integer(), nullable=True),
        sa.Column('language', sa.String(length=100), nullable=True),
        sa.Column('license', sa.String(length=100), nullable=True),
        sa.Column('url', sa.String(length=500), nullable=False),
        sa.Column('website_url', sa.String(length=500), nullable=True),
        sa.Column('default_branch', sa.String(length=255), nullable=True),
        sa.Column('is_private', sa.Boolean(), nullable=False),
        sa.Column('is_fork', sa.Boolean(), nullable=True),
        sa.Column('is_template', sa.Boolean(), nullable=True),
        sa.Column('is_archived', sa.Boolean(), nullable=False),
        *timestamps(),
        sa.ForeignKeyConstraint(
            ['installation_id'], ['github_app_installations.id'], ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_github_app_installation_repositories_installation_id'),
        'github_app_installation_repositories',
        ['installation_id'],
    )

    op.create_table(
        'user_projects',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('context', sa.JSON(), nullable=True),
        *timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_projects_user_id'), 'user_projects', ['user_id'])


def downgrade() -> None:
    op.drop_table('user_projects')
    op.drop_table('github_app_installation_repositories')
    op.drop_table('github_app_installations')
    op.drop_table('user_templates')
    op.drop_table('user_template_collections')
    op.drop_table('user_files')
    op.drop_table('chat_conversation_shares')
    op.drop_table('chat_conversation_files')
    op.drop_table('chat_messages')
    op.drop_table('chat_conversations')
    op.drop_table('oauth_accounts')
    op.drop_table('users')
    op.execute('DROP TYPE IF EXISTS messageactor')
    op.execute('DROP TYPE IF EXISTS oauthprovider')
