"""
Migration inicial para o domínio de Vagas.

Cria a tabela:
- vagas (única por pátio + número)
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='VagaModel',
            fields=[
                ('id', models.BigAutoField(
                    primary_key=True,
                    serialize=False,
                )),
                ('status', models.CharField(
                    max_length=20,
                    default='Livre',
                    help_text='Situação da vaga'
                )),
                ('numero', models.IntegerField(
                    help_text='Número da vaga no pátio'
                )),
                ('patio', models.CharField(
                    max_length=50,
                    db_index=True,
                    help_text='Nome do pátio'
                )),
            ],
            options={
                'db_table': 'vagas',
                'verbose_name': 'Vaga',
                'verbose_name_plural': 'Vagas',
                'ordering': ['id'],
            },
        ),
        migrations.AddConstraint(
            model_name='vagamodel',
            constraint=models.UniqueConstraint(
                fields=('patio', 'numero'),
                name='uk_vaga_patio_numero',
            ),
        ),
    ]
