"""
Huey task queue configuration.

Uses SQLite backend for simplicity (single-server deployment).

Run consumer with:
    huey_consumer huey_config.huey -w 1 -k thread
"""
import logging
import os
from pathlib import Path
from huey import SqliteHuey

# Configure logging for photomoments modules
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s:%(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
# Reduce SQLAlchemy noise
logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

# Database path for Huey queue (separate from app database)
HUEY_DB_PATH = Path(os.environ.get('HUEY_DB_PATH', Path(__file__).parent / 'instance' / 'huey_queue.db'))

# Ensure instance directory exists
HUEY_DB_PATH.parent.mkdir(parents=True, exist_ok=True)

huey = SqliteHuey(
    name='photomoments-tasks',
    filename=str(HUEY_DB_PATH),
    immediate=False,  # Don't run tasks synchronously (important for testing)
    utc=True,         # Store all times as UTC
)

# Import tasks to register them with the huey instance
# This must happen AFTER huey is defined since tasks.py imports huey from here
from photomoments import tasks  # noqa: F401, E402

# Consumer configuration
# Moment runs are exclusive, one worker thread is enough
CONSUMER_CONFIG = {
    'workers': int(os.environ.get('HUEY_WORKERS', 1)),
    'worker_type': 'thread',
    'initial_delay': 0.1,
    'backoff': 1.15,
    'max_delay': 1.0,
    'periodic': True,       # Enable periodic tasks
    'check_worker_health': True,
    'health_check_interval': 10,
}
