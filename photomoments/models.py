"""SQLAlchemy database models for PhotoMoments.

Defines the catalog tables read by the moment queries (photos, labels) and
the album table the moments worker reconciles against.
Uses SQLAlchemy 2.x type-safe patterns with Mapped and mapped_column.
"""
from datetime import datetime, timezone
from enum import Enum as PyEnum
from typing import Optional, List
from sqlalchemy import Integer, String, DateTime, Text, ForeignKey, Index, UniqueConstraint
from sqlalchemy import Enum as SQLEnum, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.engine import Engine
from photomoments import db

UNKNOWN_COUNTRY = 'zz'


# ============================================================================
# Enums
# ============================================================================

class MediaType(str, PyEnum):
    """Kind of catalog entry."""
    PHOTO = "photo"
    VIDEO = "video"


class AlbumType(str, PyEnum):
    """Album types; everything except ALBUM is created automatically."""
    ALBUM = "album"      # Created by hand
    FOLDER = "folder"    # One per popular folder
    MONTH = "month"      # One per year and month
    MOMENT = "moment"    # Countries, states and labels


class AlbumState(str, PyEnum):
    """Album lifecycle. Deleted albums are kept for history."""
    ACTIVE = "active"
    DELETED = "deleted"


# ============================================================================
# Association Tables
# ============================================================================

photo_labels = db.Table('photo_labels',
    db.Column('photo_id', Integer, ForeignKey('photos.id'), primary_key=True),
    db.Column('label_id', Integer, ForeignKey('labels.id'), primary_key=True)
)


# ============================================================================
# Models
# ============================================================================

class Photo(db.Model):
    """A photo or video in the indexed catalog."""
    __tablename__ = 'photos'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Location in the originals folder
    photo_path: Mapped[str] = mapped_column(String(500), default='', nullable=False)  # Folder, relative
    photo_name: Mapped[str] = mapped_column(String(255), nullable=False)

    media_type: Mapped[MediaType] = mapped_column(
        SQLEnum(MediaType),
        default=MediaType.PHOTO,
        nullable=False
    )

    # Time and place, 0 / '' / 'zz' when unknown
    taken_at: Mapped[Optional[datetime]] = mapped_column(DateTime)
    photo_year: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    photo_month: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    photo_country: Mapped[str] = mapped_column(String(2), default=UNKNOWN_COUNTRY, nullable=False)
    photo_state: Mapped[str] = mapped_column(String(100), default='', nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime)

    labels: Mapped[List["Label"]] = relationship(
        secondary=photo_labels,
        back_populates="photos"
    )

    __table_args__ = (
        Index('ix_photos_path', 'photo_path'),
        Index('ix_photos_year_month', 'photo_year', 'photo_month'),
        Index('ix_photos_country_state', 'photo_country', 'photo_state'),
    )

    def __repr__(self):
        return f"<Photo {self.id}: {self.photo_path}/{self.photo_name}>"


class Label(db.Model):
    """Classification label attached to photos."""
    __tablename__ = 'labels'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label_slug: Mapped[str] = mapped_column(String(160), unique=True, nullable=False)
    label_name: Mapped[str] = mapped_column(String(160), nullable=False)

    photos: Mapped[List["Photo"]] = relationship(
        secondary=photo_labels,
        back_populates="labels"
    )

    def __repr__(self):
        return f"<Label {self.id}: {self.label_slug}>"


class Album(db.Model):
    """Photo album, identified by slug and type."""
    __tablename__ = 'albums'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    album_slug: Mapped[str] = mapped_column(String(160), nullable=False)
    album_type: Mapped[AlbumType] = mapped_column(
        SQLEnum(AlbumType),
        default=AlbumType.ALBUM,
        nullable=False
    )
    album_title: Mapped[str] = mapped_column(String(160), nullable=False)
    album_filter: Mapped[str] = mapped_column(Text, default='', nullable=False)  # Serialized PhotoSearch

    album_path: Mapped[str] = mapped_column(String(500), default='', nullable=False)
    album_year: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    album_month: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    album_country: Mapped[str] = mapped_column(String(2), default=UNKNOWN_COUNTRY, nullable=False)
    album_state: Mapped[str] = mapped_column(String(100), default='', nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime)  # Soft delete

    __table_args__ = (
        UniqueConstraint('album_slug', 'album_type', name='uq_albums_slug_type'),
        Index('ix_albums_type', 'album_type'),
    )

    @property
    def state(self) -> AlbumState:
        """Lifecycle state derived from the soft delete marker."""
        if self.deleted_at is not None:
            return AlbumState.DELETED
        return AlbumState.ACTIVE

    @classmethod
    def new_folder_album(cls, title: str, slug: str, filter_str: str) -> "Album":
        return cls(album_title=title, album_slug=slug, album_type=AlbumType.FOLDER,
                   album_filter=filter_str)

    @classmethod
    def new_month_album(cls, title: str, slug: str, year: int, month: int, filter_str: str) -> "Album":
        return cls(album_title=title, album_slug=slug, album_type=AlbumType.MONTH,
                   album_year=year, album_month=month, album_filter=filter_str)

    @classmethod
    def new_moments_album(cls, title: str, slug: str, filter_str: str) -> "Album":
        return cls(album_title=title, album_slug=slug, album_type=AlbumType.MOMENT,
                   album_filter=filter_str)

    @classmethod
    def find_by_slug(cls, slug: str, album_type: AlbumType) -> Optional["Album"]:
        """
        Look up an album by its identity, including soft-deleted ones.

        Args:
            slug: Album slug
            album_type: Album type

        Returns:
            Album instance or None
        """
        return db.session.execute(
            db.select(cls).where(cls.album_slug == slug, cls.album_type == album_type)
        ).scalar_one_or_none()

    def create(self):
        """Insert the album; rolls back and re-raises on database errors."""
        try:
            db.session.add(self)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise

    def update(self, field: str, value):
        """
        Update a single column and commit.

        Args:
            field: Column attribute name, e.g. 'album_filter'
            value: New value

        Raises:
            AttributeError: If the album has no such column
            SQLAlchemyError: On database errors (session is rolled back)
        """
        if field not in self.__table__.columns:
            raise AttributeError(f"Album has no column {field!r}")

        try:
            setattr(self, field, value)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise

    def soft_delete(self):
        """Mark the album as deleted without removing the row."""
        if self.deleted_at is None:
            self.deleted_at = datetime.now(timezone.utc)
            db.session.commit()

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'slug': self.album_slug,
            'type': self.album_type.value,
            'title': self.album_title,
            'filter': self.album_filter,
            'path': self.album_path,
            'year': self.album_year,
            'month': self.album_month,
            'country': self.album_country,
            'state': self.album_state,
            'lifecycle': self.state.value,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'deleted_at': self.deleted_at.isoformat() if self.deleted_at else None,
        }

    def __repr__(self):
        return f"<Album {self.id}: {self.album_type.value}/{self.album_slug}>"


# ============================================================================
# SQLite Foreign Key Enforcement
# ============================================================================

@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable foreign key constraints for SQLite connections."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
