"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship

from taskmanager.domain.models.base import utcnow
from taskmanager.infrastructure.db.database import Base


class UserModel(Base):
    """Registered users."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="colaborador")

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    tasks = relationship(
        "TaskModel", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True
    )
    managed_projects = relationship(
        "ProjectModel", back_populates="gestor", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint("role IN ('colaborador', 'gestor', 'admin')", name="ck_users_role"),
    )


class TaskModel(Base):
    """Tasks, each owned by one user."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(String(50), nullable=False, default="pending")
    priority = Column(String(50))
    due_date = Column(DateTime)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    owner = relationship("UserModel", back_populates="tasks")
    comments = relationship(
        "TaskCommentModel", back_populates="task", cascade="all, delete-orphan", passive_deletes=True
    )
    attachments = relationship(
        "TaskAttachmentModel", back_populates="task", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (
        Index("idx_tasks_user_id", "user_id"),
        CheckConstraint("status IN ('pending', 'completed')", name="ck_tasks_status"),
    )


class ProjectModel(Base):
    """Projects managed by a gestor."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    gestor_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    deadline = Column(DateTime, nullable=False)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    gestor = relationship("UserModel", back_populates="managed_projects")

    __table_args__ = (
        Index("idx_projects_gestor_id", "gestor_id"),
    )


class TaskCommentModel(Base):
    """Comments on tasks."""

    __tablename__ = "task_comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    content = Column(Text, nullable=False)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    task = relationship("TaskModel", back_populates="comments")
    author = relationship("UserModel")

    __table_args__ = (
        Index("idx_task_comments_task_id", "task_id"),
    )


class TaskAttachmentModel(Base):
    """Files attached to tasks. Rows are never updated."""

    __tablename__ = "task_attachments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    filename = Column(String(255), nullable=False)
    filepath = Column(String(500), nullable=False)
    filesize = Column(Integer, nullable=False)
    mimetype = Column(String(100), nullable=False)

    created_at = Column(DateTime, nullable=False, default=utcnow)

    # Relationships
    task = relationship("TaskModel", back_populates="attachments")
    uploader = relationship("UserModel")

    __table_args__ = (
        Index("idx_task_attachments_task_id", "task_id"),
    )
