"""
Adapter Django do domínio Workforce.

Models, mappers e repositórios que implementam os Ports de
src/core/workforce/ports.py sobre o Django ORM.
"""
