"""
Configuração do projeto Workforce Manager.

Módulos:
- settings: Configurações Django (python-dotenv)
- container: Dependency Injection Container
"""
