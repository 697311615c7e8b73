"""
Database Models using SQLAlchemy.

These define the document store the resolver reads from: team-owned apps,
their published versions, and the customization records that link a system
plugin to the team app backing it.
They are NOT related to:
- API schemas (see pluginhub.schemas.api_schemas)
- The static system plugin registry (see pluginhub.registry)
"""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text, JSON, UniqueConstraint
from sqlalchemy.orm import declarative_base, relationship
import datetime
import uuid

Base = declarative_base()

def generate_uuid():
    return uuid.uuid4().hex

def utcnow():
    return datetime.datetime.now(datetime.timezone.utc)

class App(Base):
    __tablename__ = "apps"

    id = Column(String, primary_key=True, default=generate_uuid)
    team_id = Column(String, nullable=False)
    tmb_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    avatar = Column(String, default="")
    intro = Column(Text, default="")
    nodes = Column(JSON, default=list)
    edges = Column(JSON, default=list)
    chat_config = Column(JSON, default=dict)
    plugin_node_version = Column(String, nullable=True)
    created_at = Column(DateTime, default=utcnow)

    # Relationships
    versions = relationship("AppVersion", back_populates="app", cascade="all, delete-orphan")

class AppVersion(Base):
    __tablename__ = "app_versions"

    id = Column(String, primary_key=True, default=generate_uuid)
    app_id = Column(String, ForeignKey("apps.id", ondelete="CASCADE"), nullable=False, index=True)
    version_name = Column(String, nullable=True)
    nodes = Column(JSON, default=list)
    edges = Column(JSON, default=list)
    chat_config = Column(JSON, default=dict)
    is_publish = Column(Boolean, default=True)
    created_at = Column(DateTime, default=utcnow)

    # Relationships
    app = relationship("App", back_populates="versions")

class SystemPluginCustomization(Base):
    __tablename__ = "system_plugin_customizations"
    __table_args__ = (UniqueConstraint("plugin_id", name="uq_system_plugin_customization_plugin"),)

    id = Column(String, primary_key=True, default=generate_uuid)
    plugin_id = Column(String, nullable=False)
    associated_plugin_id = Column(String, nullable=True)
    created_at = Column(DateTime, default=utcnow)
