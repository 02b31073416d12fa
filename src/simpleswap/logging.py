import logging

"""
Create a global logger instance shared by the pool, ledgers and command line.
"""

logger = logging.getLogger(__name__)
logger.propagate = False
logger.setLevel(logging.INFO)
logger.addHandler(logging.StreamHandler())
