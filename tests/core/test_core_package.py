"""
Testes de importação dos pacotes do core.
"""

import importlib

import pytest


@pytest.mark.parametrize("modulo", [
    "src.core",
    "src.core.shared",
    "src.core.usuarios",
    "src.core.pius",
    "src.core.pius.use_cases",
])
def test_pacotes_do_core_importam(modulo):
    pacote = importlib.import_module(modulo)

    assert pacote.__doc__
