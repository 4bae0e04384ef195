"""Integration tests for configuration, models, API routes and Huey tasks."""
import pytest
from sqlalchemy.exc import IntegrityError

from photomoments import db, create_app
from photomoments.models import Album, AlbumType, AlbumState
from photomoments.lib.guard import main_worker


class TestConfig:
    """Test configuration loading."""

    def test_testing_config(self, app):
        assert app.config['TESTING'] is True
        assert app.config['MOMENTS_ENABLED'] is True
        assert app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///')

    def test_config_lookup(self):
        from config import config, DevelopmentConfig, TestingConfig
        assert config['default'] is DevelopmentConfig
        assert config['testing'] is TestingConfig
        assert TestingConfig.SQLALCHEMY_DATABASE_URI == 'sqlite://'

    def test_unknown_config_name(self):
        with pytest.raises(KeyError):
            create_app('staging')


class TestAlbumModel:
    """Test Album model behavior."""

    def test_slug_and_type_unique(self, app):
        Album.new_moments_album('Beach', 'beach', 'label:beach').create()

        with pytest.raises(IntegrityError):
            Album.new_moments_album('Beach', 'beach', 'label:sand').create()

        # Session was rolled back and remains usable
        assert Album.find_by_slug('beach', AlbumType.MOMENT).album_filter == 'label:beach'

    def test_soft_delete(self, app):
        album = Album.new_folder_album('Holiday', 'holiday', 'path:Holiday')
        album.create()
        assert album.state is AlbumState.ACTIVE

        album.soft_delete()

        found = Album.find_by_slug('holiday', AlbumType.FOLDER)
        assert found is not None
        assert found.state is AlbumState.DELETED

    def test_update_unknown_column(self, app):
        album = Album.new_moments_album('Beach', 'beach', 'label:beach')
        album.create()

        with pytest.raises(AttributeError):
            album.update('album_colour', 'blue')

    def test_to_dict(self, app):
        album = Album.new_month_album('July 2019', 'july-2019', 2019, 7, 'year:2019 month:7')
        album.create()

        data = album.to_dict()

        assert data['type'] == 'month'
        assert data['lifecycle'] == 'active'
        assert (data['year'], data['month'], data['country']) == (2019, 7, 'zz')
        assert data['deleted_at'] is None


class TestApiRoutes:
    """Test the /api blueprint."""

    def test_start_moments_queues_task(self, client, monkeypatch):
        monkeypatch.setattr('photomoments.routes.api.enqueue_moments', lambda: 'task-123')

        response = client.post('/api/moments')

        assert response.status_code == 202
        assert response.get_json() == {'task_id': 'task-123'}

    def test_status_idle(self, client):
        response = client.get('/api/moments/status')

        assert response.status_code == 200
        assert response.get_json() == {'running': False, 'cancelled': False}

    def test_cancel_without_run(self, client):
        response = client.post('/api/moments/cancel')

        assert response.status_code == 409
        assert response.get_json()['cancelled'] is False

    def test_cancel_active_run(self, client):
        main_worker.start()
        try:
            response = client.post('/api/moments/cancel')
            assert response.status_code == 200
            assert main_worker.canceled is True
        finally:
            main_worker.stop()

    def test_list_albums(self, client):
        Album.new_moments_album('Beach', 'beach', 'label:beach').create()
        Album.new_folder_album('Holiday', 'holiday', 'path:Holiday').create()
        deleted = Album.new_moments_album('Snow', 'snow', 'label:snow')
        deleted.create()
        deleted.soft_delete()

        albums = client.get('/api/albums').get_json()['albums']
        assert [a['slug'] for a in albums] == ['holiday', 'beach']

        moments = client.get('/api/albums?type=moment&deleted=1').get_json()['albums']
        assert [a['slug'] for a in moments] == ['beach', 'snow']

    def test_list_albums_unknown_type(self, client):
        response = client.get('/api/albums?type=smart')
        assert response.status_code == 400


class TestTasks:
    """Test Huey tasks executed in-process."""

    @pytest.fixture
    def tasks(self, app, monkeypatch):
        from photomoments import tasks
        monkeypatch.setattr(tasks, 'get_app', lambda: app)
        return tasks

    def test_create_moments(self, tasks, add_photo):
        for _ in range(3):
            add_photo(path='Holiday', year=2019, month=7)

        result = tasks.create_moments.call_local()

        assert result['status'] == 'completed'
        assert result['created'] == 2
        assert main_worker.running is False

    def test_create_moments_busy(self, tasks):
        main_worker.start()
        try:
            result = tasks.create_moments.call_local()
        finally:
            main_worker.stop()

        assert result['status'] == 'busy'

    def test_scheduled_moments_disabled(self, tasks, app, add_photo):
        for _ in range(3):
            add_photo(path='Holiday')
        app.config['MOMENTS_ENABLED'] = False

        assert tasks.scheduled_moments.call_local() is None
        assert db.session.execute(db.select(Album)).scalars().all() == []

    def test_scheduled_moments_enabled(self, tasks):
        result = tasks.scheduled_moments.call_local()
        assert result['status'] == 'skipped'

    def test_health_check(self, tasks):
        result = tasks.health_check.call_local()
        assert result['status'] == 'ok'
        assert result['moments_running'] is False
