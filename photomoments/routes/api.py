"""API routes for triggering moment discovery and listing albums."""
import logging
from flask import Blueprint, jsonify, request

from photomoments import db
from photomoments.models import Album, AlbumType
from photomoments.lib.guard import main_worker
from photomoments.tasks import enqueue_moments, cancel_moments

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__, url_prefix='/api')


@api_bp.route('/moments', methods=['POST'])
def start_moments():
    """Queue a moments run.

    Returns:
        202 with the Huey task id
    """
    task_id = enqueue_moments()
    logger.info(f"moments: queued run {task_id}")
    return jsonify({'task_id': task_id}), 202


@api_bp.route('/moments/status', methods=['GET'])
def moments_status():
    """Report whether a run is active in this process."""
    return jsonify({
        'running': main_worker.running,
        'cancelled': main_worker.canceled,
    })


@api_bp.route('/moments/cancel', methods=['POST'])
def stop_moments():
    """Cancel the active run after its current moment source.

    Only reaches runs executing in this process (standalone mode).
    """
    if not main_worker.running:
        return jsonify({'cancelled': False, 'error': 'No moments run active'}), 409

    cancel_moments()
    return jsonify({'cancelled': True})


@api_bp.route('/albums', methods=['GET'])
def list_albums():
    """List albums.

    Query parameters:
        type: album type filter ('album', 'folder', 'month', 'moment')
        deleted: '1' to include soft-deleted albums

    Returns:
        JSON with 'albums' list, ordered by type and slug
    """
    stmt = db.select(Album).order_by(Album.album_type, Album.album_slug)

    album_type = request.args.get('type')
    if album_type:
        try:
            stmt = stmt.where(Album.album_type == AlbumType(album_type))
        except ValueError:
            return jsonify({'error': f'Unknown album type: {album_type}'}), 400

    if request.args.get('deleted') != '1':
        stmt = stmt.where(Album.deleted_at.is_(None))

    albums = db.session.execute(stmt).scalars().all()
    return jsonify({'albums': [a.to_dict() for a in albums]})
