"""
Migration inicial para o domínio de Motos.

Cria a tabela:
- motos
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='MotoModel',
            fields=[
                ('id', models.BigAutoField(
                    primary_key=True,
                    serialize=False,
                )),
                ('placa', models.CharField(
                    max_length=7,
                    db_index=True,
                    help_text='Placa no padrão antigo ou Mercosul (ex.: KAC7516)'
                )),
                ('marca', models.CharField(
                    max_length=50,
                    help_text='Fabricante da moto'
                )),
                ('modelo', models.CharField(
                    max_length=50,
                    help_text='Modelo da moto'
                )),
                ('ano', models.IntegerField(
                    help_text='Ano de fabricação'
                )),
            ],
            options={
                'db_table': 'motos',
                'verbose_name': 'Moto',
                'verbose_name_plural': 'Motos',
                'ordering': ['id'],
            },
        ),
    ]
