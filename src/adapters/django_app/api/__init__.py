"""
Adapter HTTP (Django) da API do PiuPiuwer.

Exposição JSON dos use cases de usuários e pius, sem models nem banco.
"""
