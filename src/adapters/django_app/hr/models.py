"""
Django Models do serviço de RH.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/<recurso>/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Models são mapeados para/de Entities via Mappers
- Referências entre recursos são ForeignKey sem constraint no banco
  (db_constraint=False); o core trata os IDs como opacos

Tabelas:
- organizational_units
- compensation_bands
- job_positions
- workers
"""

from django.db import models


class GenderChoices(models.TextChoices):
    """Choices para gênero (espelha Gender do Core)."""
    MALE = 'Male', 'Male'
    FEMALE = 'Female', 'Female'


class AuditedModel(models.Model):
    """
    Base abstrata com ID e auditoria.

    Fields:
        id: UUID como primary key (gerado pela Entity)
        created_at / last_modified_at: preenchidos pelo banco
        created_by / last_modified_by: usuário responsável
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do registro"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    created_by = models.CharField(max_length=100, null=True, blank=True)
    last_modified_at = models.DateTimeField(auto_now=True)
    last_modified_by = models.CharField(max_length=100, null=True, blank=True)

    class Meta:
        abstract = True


class OrganizationalUnitModel(AuditedModel):
    """Unidade organizacional."""

    name = models.CharField(max_length=100, db_index=True)

    class Meta:
        db_table = 'organizational_units'
        verbose_name = 'Unidade Organizacional'
        verbose_name_plural = 'Unidades Organizacionais'

    def __str__(self):
        return self.name


class CompensationBandModel(AuditedModel):
    """Faixa salarial."""

    name = models.CharField(max_length=100, db_index=True)
    min_salary = models.DecimalField(max_digits=18, decimal_places=2)
    max_salary = models.DecimalField(max_digits=18, decimal_places=2)

    class Meta:
        db_table = 'compensation_bands'
        verbose_name = 'Faixa Salarial'
        verbose_name_plural = 'Faixas Salariais'

    def __str__(self):
        return self.name


class JobPositionModel(AuditedModel):
    """Cargo."""

    title = models.CharField(max_length=100, db_index=True)
    number = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True, default='')

    unit = models.ForeignKey(
        OrganizationalUnitModel,
        null=True,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='positions',
    )

    band = models.ForeignKey(
        CompensationBandModel,
        null=True,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='positions',
    )

    class Meta:
        db_table = 'job_positions'
        verbose_name = 'Cargo'
        verbose_name_plural = 'Cargos'

    def __str__(self):
        return f"{self.number} {self.title}"


class WorkerModel(AuditedModel):
    """Trabalhador."""

    first_name = models.CharField(max_length=100, db_index=True)
    middle_name = models.CharField(max_length=100, null=True, blank=True)
    last_name = models.CharField(max_length=100, db_index=True)
    email = models.CharField(max_length=254)
    worker_number = models.CharField(max_length=50, unique=True)
    prefix = models.CharField(max_length=20, null=True, blank=True)
    phone = models.CharField(max_length=50, null=True, blank=True)
    salary = models.DecimalField(max_digits=18, decimal_places=2)
    birthday = models.DateField(null=True, blank=True)
    gender = models.CharField(
        max_length=10,
        choices=GenderChoices.choices,
        default=GenderChoices.MALE,
    )

    position = models.ForeignKey(
        JobPositionModel,
        null=True,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='workers',
    )

    class Meta:
        db_table = 'workers'
        verbose_name = 'Trabalhador'
        verbose_name_plural = 'Trabalhadores'
        indexes = [
            models.Index(fields=['last_name', 'first_name'], name='workers_last_first_idx'),
        ]

    def __str__(self):
        return f"{self.worker_number} {self.last_name}"
