"""
Migration inicial para o domínio de Usuários.

Cria a tabela:
- usuarios (email e CPF únicos)
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='UsuarioModel',
            fields=[
                ('id', models.BigAutoField(
                    primary_key=True,
                    serialize=False,
                )),
                ('nome', models.CharField(
                    max_length=120,
                    help_text='Nome do usuário'
                )),
                ('email', models.CharField(
                    max_length=254,
                    help_text='Email (minúsculas)'
                )),
                ('senha', models.CharField(
                    max_length=100,
                    help_text='Senha do usuário'
                )),
                ('cpf', models.CharField(
                    max_length=11,
                    help_text='CPF (somente dígitos)'
                )),
            ],
            options={
                'db_table': 'usuarios',
                'verbose_name': 'Usuário',
                'verbose_name_plural': 'Usuários',
                'ordering': ['id'],
            },
        ),
        migrations.AddConstraint(
            model_name='usuariomodel',
            constraint=models.UniqueConstraint(fields=('email',), name='uk_usuario_email'),
        ),
        migrations.AddConstraint(
            model_name='usuariomodel',
            constraint=models.UniqueConstraint(fields=('cpf',), name='uk_usuario_cpf'),
        ),
    ]
