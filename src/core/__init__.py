"""
Core Domain Layer - O Hexágono.

Lógica de negócio do PiuPiuwer, sem dependência de Django:
- shared: exceções, Result, validadores, store em memória, Unit of Work
- usuarios: cadastro com unicidade de username, email, CPF e telefone
- pius: postagens curtas, busca e sorteio
"""
