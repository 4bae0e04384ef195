"""Shared pytest fixtures."""
import os
import tempfile
from pathlib import Path

import pytest

# Keep the Huey queue database out of the project instance folder
os.environ.setdefault('HUEY_DB_PATH', str(Path(tempfile.gettempdir()) / 'photomoments_test_huey.db'))


@pytest.fixture
def app(tmp_path):
    """Create application with a temporary SQLite database."""
    from photomoments import create_app, db

    app = create_app('testing', {
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'test.db'}",
    })

    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client for HTTP requests."""
    return app.test_client()


@pytest.fixture
def add_photo(app):
    """Factory adding a catalog entry, creating labels on demand."""
    from photomoments import db
    from photomoments.models import Photo, Label, MediaType

    def _add(path='', name='photo.jpg', year=0, month=0, country='zz', state='',
             media_type=MediaType.PHOTO, labels=(), deleted=False):
        photo = Photo(
            photo_path=path,
            photo_name=name,
            media_type=media_type,
            photo_year=year,
            photo_month=month,
            photo_country=country,
            photo_state=state,
        )
        for slug in labels:
            label = db.session.execute(
                db.select(Label).filter_by(label_slug=slug)
            ).scalar_one_or_none()
            if label is None:
                label = Label(label_slug=slug, label_name=slug.title())
                db.session.add(label)
            photo.labels.append(label)
        if deleted:
            from datetime import datetime, timezone
            photo.deleted_at = datetime.now(timezone.utc)
        db.session.add(photo)
        db.session.commit()
        return photo

    return _add
