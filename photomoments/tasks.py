"""
Huey background tasks for moment discovery.

Tasks run in worker processes/threads, separate from the Flask web server.
Each task that needs database access must create its own Flask application context.
"""
from datetime import datetime, timezone
import logging

from huey import crontab

from config import Config
from huey_config import huey
from photomoments.lib.guard import WorkerBusyError, main_worker
from photomoments.lib.moments import MomentsWorker

logger = logging.getLogger(__name__)


def get_app():
    """
    Create Flask application for use in worker context.

    Must be called inside task to avoid import-time side effects.
    """
    from photomoments import create_app
    return create_app()


def run_moments(app) -> dict:
    """
    Run the moments worker once inside the given application.

    Args:
        app: Flask application

    Returns:
        Worker result dict, or {'status': 'busy', 'error': str} if a run is active
    """
    with app.app_context():
        try:
            return MomentsWorker(main_worker).start()
        except WorkerBusyError as e:
            return {'status': 'busy', 'error': str(e)}


@huey.task()
def create_moments() -> dict:
    """
    Create albums based on popular folders, months, places and labels.

    Returns:
        Dictionary with result info, see MomentsWorker.start()
    """
    return run_moments(get_app())


@huey.periodic_task(crontab(minute='0', hour=Config.MOMENTS_CRON_HOUR))
def scheduled_moments():
    """Periodic moment discovery, disabled with MOMENTS_ENABLED=0."""
    app = get_app()
    if not app.config.get('MOMENTS_ENABLED', True):
        logger.debug("moments: scheduled run disabled")
        return None

    result = run_moments(app)
    logger.info(f"moments: scheduled run finished with status {result['status']}")
    return result


@huey.task()
def health_check() -> dict:
    """
    Simple health check task to verify worker is running.

    Can be called from web app to confirm queue is operational.
    """
    return {
        'status': 'ok',
        'moments_running': main_worker.running,
        'timestamp': datetime.now(timezone.utc).isoformat()
    }


def cancel_moments():
    """Cancel the moments run of this process after its current source."""
    main_worker.cancel()


def enqueue_moments() -> str:
    """
    Helper function to enqueue a moments run from web app.

    Returns:
        Huey task ID (can be used to check status)
    """
    result = create_moments()
    return result.id
