"""
Database Models
===============

SQLAlchemy ORM models for all database entities.

All models are imported here to ensure they are registered
with SQLAlchemy's metadata for migrations and relationships.
"""

from lifehub.models.user import User, UserPreferences
from lifehub.models.habit import Habit, HabitCompletion
from lifehub.models.journal import JournalEntry
from lifehub.models.focus import MeditationSession, PomodoroSession
from lifehub.models.relaxation import FavoriteSound, RelaxationSound
from lifehub.models.book import Book, ReadingStatus
from lifehub.models.finance import Transaction, TransactionType
from lifehub.models.goal import Goal, Milestone, Skill
from lifehub.models.tracking import EnergyLog, Note, Todo

__all__ = [
    # User
    "User",
    "UserPreferences",
    # Habits
    "Habit",
    "HabitCompletion",
    # Journal
    "JournalEntry",
    # Focus
    "PomodoroSession",
    "MeditationSession",
    # Relaxation
    "RelaxationSound",
    "FavoriteSound",
    # Books
    "Book",
    "ReadingStatus",
    # Finance
    "Transaction",
    "TransactionType",
    # Goals
    "Goal",
    "Milestone",
    "Skill",
    # Tracking
    "EnergyLog",
    "Todo",
    "Note",
]
