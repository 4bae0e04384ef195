#!/usr/bin/env python3
"""
PhotoMoments Application Entry Point.

Run the development server:
    python run.py

Run in standalone mode (Flask + Huey worker in one process):
    python run.py --standalone

Create moment albums once and exit:
    python run.py --moments

Or with Flask CLI:
    FLASK_APP=run flask run
"""
import os
from photomoments import create_app

# Determine config from environment, default to development
config_name = os.environ.get('FLASK_ENV', 'development')

app = create_app(config_name)


def start_embedded_consumer():
    """Start Huey consumer threads inside the Flask process.

    Manually starts scheduler + worker threads (skipping signal handler
    registration which only works from the main thread). All threads are
    daemon threads so they terminate when Flask exits.

    Returns the Consumer instance.
    """
    import threading
    import time
    from huey.consumer import Consumer, ConsumerStopped
    from huey_config import huey, CONSUMER_CONFIG

    consumer = Consumer(huey,
        workers=CONSUMER_CONFIG['workers'],
        worker_type='thread',
        initial_delay=0.05,
        backoff=1.2,
        max_delay=0.3,
        periodic=True,
        check_worker_health=True,
        health_check_interval=10,
    )

    consumer.scheduler.daemon = True
    consumer.scheduler.start()
    for _, worker_thread in consumer.worker_threads:
        worker_thread.daemon = True
        worker_thread.start()

    # Restarts worker threads that die unexpectedly
    def _health_loop():
        health_check_ts = time.time()
        while not consumer.stop_flag.is_set():
            try:
                health_check_ts = consumer.loop(health_check_ts)
            except ConsumerStopped:
                break
            time.sleep(1)

    threading.Thread(target=_health_loop, daemon=True, name='huey-health').start()

    return consumer


if __name__ == '__main__':
    import argparse
    import json

    parser = argparse.ArgumentParser(description='PhotoMoments server')
    parser.add_argument('--standalone', action='store_true',
                        help='Run Flask + Huey worker in a single process')
    parser.add_argument('--moments', action='store_true',
                        help='Create moment albums once, print the result and exit')
    parser.add_argument('--port', type=int, default=5000,
                        help='Port to listen on (default: 5000)')
    parser.add_argument('--host', default='0.0.0.0',
                        help='Host to bind to (default: 0.0.0.0)')
    args = parser.parse_args()

    if args.moments:
        from photomoments.tasks import run_moments
        result = run_moments(app)
        print(json.dumps(result, indent=2))
        raise SystemExit(0 if result['status'] in ('completed', 'skipped') else 1)

    print(f"Starting PhotoMoments in {config_name} mode...")
    print(f"Database: {app.config['SQLALCHEMY_DATABASE_URI']}")

    if args.standalone:
        print("\n[Standalone] Starting embedded Huey consumer...")
        consumer = start_embedded_consumer()
        app.config['STANDALONE_CONSUMER'] = consumer
        print("[Standalone] Huey consumer threads started")

        # Reloader would fork and duplicate the consumer threads
        app.run(
            host=args.host,
            port=args.port,
            debug=False,
            use_reloader=False,
        )
    else:
        app.run(
            host=args.host,
            port=args.port,
            debug=app.config.get('DEBUG', False),
            threaded=True,
        )
