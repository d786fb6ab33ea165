"""
Message model - the single table behind the treehole
"""
from sqlalchemy import Column, Integer, String, Text

from treehole.core.database import Base


class Message(Base):
    """An anonymous message with its like counter"""

    __tablename__ = "messages"

    # AUTOINCREMENT so ids of deleted messages are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(Text, nullable=False)
    time = Column(String, nullable=False)  # display string, server local time
    likes = Column(Integer, nullable=False, default=0, server_default="0")

    def __repr__(self):
        return f"<Message(id={self.id}, likes={self.likes})>"
