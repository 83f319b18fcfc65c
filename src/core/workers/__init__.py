"""
Recurso Trabalhadores.
"""

from .entities import Gender, Worker
from .ports import WorkerRepository, InMemoryWorkerRepository

__all__ = [
    "Gender",
    "Worker",
    "WorkerRepository",
    "InMemoryWorkerRepository",
]
