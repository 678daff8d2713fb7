"""
Pytest Configuration and Fixtures
Shared fixtures and configuration for all tests
"""

import asyncio
import logging
import os
import sys
from collections import defaultdict

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from graphql_helpers.config import Config, configure_package_logger


# ============================================
# CONFIG FIXTURES
# ============================================

@pytest.fixture
def package_logger():
    """Package logger, reset to unconfigured settings afterwards"""
    logger = logging.getLogger('graphql_helpers')
    yield logger
    configure_package_logger(Config(log_level='', log_format=''))
    logger.setLevel(logging.NOTSET)


# ============================================
# MODULE FIXTURES
# ============================================

@pytest.fixture
def health_modules():
    """Two modules, the second extending the first"""
    return [
        {
            'schema': 'type Query { health: String }',
            'resolvers': {'Query': {'health': lambda obj, info: 'ok'}}
        },
        {
            'schema': 'extend type Query { health2: String }',
            'resolvers': {
                'Query': {
                    'health2': lambda obj, info: info.context['new_health']
                }
            },
            'context': lambda request: {'new_health': 'A-O-K'}
        }
    ]


@pytest.fixture
def hello_module():
    """Single module with one query field"""
    return {
        'schema': """
            type Query {
                hello: String
            }
        """,
        'resolvers': {
            'Query': {
                'hello': lambda obj, info: 'Hello World'
            }
        }
    }


# ============================================
# SUBSCRIPTION FIXTURES
# ============================================

CLOSE = object()


class PubSub:
    """In-memory pub/sub feeding subscription resolvers"""

    def __init__(self):
        self._queues = defaultdict(list)
        self.subscribed = asyncio.Event()

    def async_iterator(self, channel: str):
        queue = asyncio.Queue()
        self._queues[channel].append(queue)
        self.subscribed.set()
        return self._iterate(channel, queue)

    async def _iterate(self, channel, queue):
        try:
            while True:
                payload = await queue.get()
                if payload is CLOSE:
                    return
                yield payload
        finally:
            self._queues[channel].remove(queue)

    async def publish(self, channel: str, payload):
        for queue in list(self._queues[channel]):
            await queue.put(payload)

    async def close(self, channel: str):
        await self.publish(channel, CLOSE)


@pytest.fixture
def pubsub():
    """Fresh pub/sub per test"""
    return PubSub()


# ============================================
# MARKERS
# ============================================

def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "compiler: mark test as resource compiler test")
    config.addinivalue_line("markers", "binding: mark test as resolver binding test")
    config.addinivalue_line("markers", "executor: mark test as executor test")
    config.addinivalue_line("markers", "config: mark test as configuration test")
