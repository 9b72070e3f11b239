"""
Core Domain Layer - O Hexágono.

Regras de negócio da força de trabalho (departamentos, funcionários,
projetos, clientes e alocações) sem dependência de Django.

- shared: Erros, Result, UnitOfWork e eventos
- workforce: Entidades, portas, use cases e WorkforceService
"""
