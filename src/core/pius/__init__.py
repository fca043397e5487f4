"""
Domínio de Pius - Publicações curtas dos usuários.

Este módulo contém:
- Entidades (PiuEntity)
- Use Cases (CriarPiu, BuscarPius, SortearPius, ...)
- DTOs (Input/Output Data Transfer Objects)
- Ports (PiuRepository e implementação em memória)
"""

from .entities import PiuEntity
from .dtos import CriarPiuInputDTO, PiuOutputDTO
from .ports import PiuRepository, InMemoryPiuRepository

__all__ = [
    "PiuEntity",
    "CriarPiuInputDTO",
    "PiuOutputDTO",
    "PiuRepository",
    "InMemoryPiuRepository",
]
