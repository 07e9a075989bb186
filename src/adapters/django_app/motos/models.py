"""
Django Models para o domínio de Motos.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/motos/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Validação de placa/ano fica na Entity e no Value Object
- Models são mapeados para/de Entities via Mappers
"""

from django.db import models


class MotoModel(models.Model):
    """
    Model Django para persistência de Motos.

    Fields:
        id: Inteiro autoincremento (gerado pelo banco)
        placa: Placa normalizada (7 caracteres, maiúsculas)
        marca: Fabricante
        modelo: Modelo comercial
        ano: Ano de fabricação
    """

    id = models.BigAutoField(primary_key=True)

    placa = models.CharField(
        max_length=7,
        db_index=True,
        help_text="Placa no padrão antigo ou Mercosul (ex.: KAC7516)"
    )

    marca = models.CharField(
        max_length=50,
        help_text="Fabricante da moto"
    )

    modelo = models.CharField(
        max_length=50,
        help_text="Modelo da moto"
    )

    ano = models.IntegerField(
        help_text="Ano de fabricação"
    )

    class Meta:
        db_table = 'motos'
        verbose_name = 'Moto'
        verbose_name_plural = 'Motos'
        ordering = ['id']

    def __str__(self):
        return f"{self.placa} - {self.marca} {self.modelo}"

    def __repr__(self):
        return f"<MotoModel id={self.id} placa={self.placa}>"
