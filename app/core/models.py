from sqlalchemy import Column, ForeignKey, Integer, String, Numeric, Text
from sqlalchemy.orm import relationship

from app.core.database import Base

# The tables below belong to an existing store. The service only reads
# from them and never issues DDL against production.


# =========================
# Location
# =========================
class Location(Base):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)

    # Relationships
    tasks = relationship("Task", back_populates="location")


# =========================
# Task
# =========================
class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(Text, nullable=False)

    location_id = Column(
        Integer,
        ForeignKey("locations.id"),
        nullable=False,
        index=True,
    )

    # Relationships
    location = relationship("Location", back_populates="tasks")
    logged_time = relationship("LoggedTime", back_populates="task")


# =========================
# Worker
# =========================
class Worker(Base):
    __tablename__ = "workers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False)
    hourly_wage = Column(Numeric(10, 2), nullable=False)  # currency per hour

    # Relationships
    logged_time = relationship("LoggedTime", back_populates="worker")


# =========================
# LoggedTime
# =========================
class LoggedTime(Base):
    """
    One stretch of work: a worker spent time_seconds on a task.
    Every cost figure the service reports is derived from these rows.
    """

    __tablename__ = "logged_time"

    id = Column(Integer, primary_key=True, autoincrement=True)

    worker_id = Column(
        Integer,
        ForeignKey("workers.id"),
        nullable=False,
        index=True,
    )

    task_id = Column(
        Integer,
        ForeignKey("tasks.id"),
        nullable=False,
        index=True,
    )

    time_seconds = Column(Integer, nullable=False)

    # Relationships
    worker = relationship("Worker", back_populates="logged_time")
    task = relationship("Task", back_populates="logged_time")
