#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Cria dados de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    # Forçar SQLite para desenvolvimento rápido
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


SAMPLE_MOTOS = [
    {'placa': 'KAC7516', 'marca': 'Honda', 'modelo': 'CG 160', 'ano': 2021},
    {'placa': 'BRA2E19', 'marca': 'Yamaha', 'modelo': 'Fazer 250', 'ano': 2023},
    {'placa': 'MOT0A12', 'marca': 'Honda', 'modelo': 'Biz 125', 'ano': 2019},
]

SAMPLE_VAGAS = [
    {'numero': 1, 'patio': 'A'},
    {'numero': 2, 'patio': 'A', 'status': 'Ocupada'},
    {'numero': 3, 'patio': 'A'},
    {'numero': 1, 'patio': 'B'},
]

SAMPLE_USUARIOS = [
    {'nome': 'Ana Souza', 'email': 'ana@example.com', 'senha': 'senha-ana-123', 'cpf': '11122233344'},
    {'nome': 'Bruno Lima', 'email': 'bruno@example.com', 'senha': 'senha-bruno-123', 'cpf': '55566677788'},
]


def create_sample_data():
    """
    Cria dados de exemplo pelos Use Cases.

    Registros que já existem (conflito de unicidade) são ignorados,
    então o script pode ser executado mais de uma vez.
    """
    from src.config.container import get_container
    from src.core.shared.exceptions import ConflictError
    from src.core.motos.dtos import MotoInputDTO
    from src.core.vagas.dtos import VagaInputDTO
    from src.core.usuarios.dtos import UsuarioInputDTO

    container = get_container()

    print("📝 Criando motos de exemplo...")
    motos_service = container.buscar_motos_por_placa_service()
    for data in SAMPLE_MOTOS:
        if motos_service.execute(data['placa']):
            print(f"   - {data['placa']} já existe")
            continue
        output = container.criar_moto_service().execute(MotoInputDTO(**data))
        print(f"   ✓ {output.placa} {output.marca} {output.modelo}")

    print("📝 Criando vagas de exemplo...")
    for data in SAMPLE_VAGAS:
        try:
            output = container.criar_vaga_service().execute(VagaInputDTO(**data))
            print(f"   ✓ Pátio {output.patio} - vaga {output.numero} ({output.status})")
        except ConflictError as e:
            print(f"   - {e.message}")

    print("📝 Criando usuários de exemplo...")
    for data in SAMPLE_USUARIOS:
        try:
            output = container.criar_usuario_service().execute(UsuarioInputDTO(**data))
            print(f"   ✓ {output.nome} <{output.email}>")
        except ConflictError as e:
            print(f"   - {data['email']}: {e.message}")

    print("✅ Dados de exemplo criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from src.adapters.django_app.shared.database import health_check

    print("🔍 Verificando conexão com o banco...")

    if health_check():
        print("✅ Conexão OK!")
        return True

    print("❌ Erro de conexão (veja o log acima)")
    return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. Acesse: http://localhost:8000/api/moto/")
    print("   3. Acesse: http://localhost:8000/api/vaga/patio/?patio=A")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Pátio Manager - Quick Setup")
    print("=" * 60 + "\n")

    # Configurar Django
    setup_django()

    if args.check_only:
        check_connection()
        return

    # Verificar conexão
    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está acessível.")
        return

    # Executar migrations
    run_migrations()

    # Criar dados de exemplo
    if args.with_sample_data:
        create_sample_data()

    # Mostrar informações
    show_info()


if __name__ == '__main__':
    main()
