"""
Django Models para o domínio de Vagas.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/vagas/entities.py.

A unicidade de (pátio, número) é garantida aqui, por constraint
do banco; o repositório a traduz em ConflictError.
"""

from django.db import models


class VagaModel(models.Model):
    """
    Model Django para persistência de Vagas.

    Fields:
        id: Inteiro autoincremento (gerado pelo banco)
        status: Texto livre ("Livre", "Ocupada", ...)
        numero: Número da vaga no pátio
        patio: Nome do pátio
    """

    id = models.BigAutoField(primary_key=True)

    status = models.CharField(
        max_length=20,
        default='Livre',
        help_text="Situação da vaga"
    )

    numero = models.IntegerField(
        help_text="Número da vaga no pátio"
    )

    patio = models.CharField(
        max_length=50,
        db_index=True,
        help_text="Nome do pátio"
    )

    class Meta:
        db_table = 'vagas'
        verbose_name = 'Vaga'
        verbose_name_plural = 'Vagas'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['patio', 'numero'],
                name='uk_vaga_patio_numero',
            ),
        ]

    def __str__(self):
        return f"Pátio {self.patio} - vaga {self.numero}"

    def __repr__(self):
        return f"<VagaModel id={self.id} patio={self.patio} numero={self.numero}>"
