"""
Configuração do serviço de registros de RH.

Módulos:
- settings: Configurações Django (ORM, banco, logging)
- container: Dependency Injection Container
"""
