#!/usr/bin/env python
"""
Launch Huey worker for moment discovery.

Usage:
    python run_worker.py
"""
import logging
import sys

# Configure logging before importing huey_config
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s:%(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    stream=sys.stdout,
)

from huey.consumer_options import ConsumerConfig
from huey.consumer import Consumer
from huey_config import huey, CONSUMER_CONFIG

if __name__ == '__main__':
    print("Starting Huey worker...", flush=True)
    print(f"  Workers: {CONSUMER_CONFIG['workers']} thread(s), periodic tasks enabled", flush=True)

    config = ConsumerConfig(
        workers=CONSUMER_CONFIG['workers'],
        worker_type=CONSUMER_CONFIG['worker_type'],
        initial_delay=CONSUMER_CONFIG['initial_delay'],
        backoff=CONSUMER_CONFIG['backoff'],
        max_delay=CONSUMER_CONFIG['max_delay'],
        periodic=CONSUMER_CONFIG['periodic'],
        check_worker_health=CONSUMER_CONFIG['check_worker_health'],
        health_check_interval=CONSUMER_CONFIG['health_check_interval'],
        verbose=True,
    )

    consumer = Consumer(huey, **config.values)
    consumer.run()
