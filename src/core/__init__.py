"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.
Características:
- Zero dependências externas (Django, ORM, etc.)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura

Domínios:
- motos: motos e o value object Placa
- vagas: vagas de pátio
- usuarios: usuários da aplicação
"""
