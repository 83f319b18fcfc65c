"""
Migration inicial do serviço de RH.

Cria as tabelas:
- organizational_units
- compensation_bands
- job_positions
- workers
"""

from django.db import migrations, models
import django.db.models.deletion


def audit_fields():
    return [
        ('id', models.CharField(
            max_length=36,
            primary_key=True,
            serialize=False,
            editable=False,
            help_text='UUID único do registro'
        )),
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('created_by', models.CharField(max_length=100, null=True, blank=True)),
        ('last_modified_at', models.DateTimeField(auto_now=True)),
        ('last_modified_by', models.CharField(max_length=100, null=True, blank=True)),
    ]


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: organizational_units
        # =================================================================
        migrations.CreateModel(
            name='OrganizationalUnitModel',
            fields=audit_fields() + [
                ('name', models.CharField(max_length=100, db_index=True)),
            ],
            options={
                'db_table': 'organizational_units',
                'verbose_name': 'Unidade Organizacional',
                'verbose_name_plural': 'Unidades Organizacionais',
                'abstract': False,
            },
        ),

        # =================================================================
        # Tabela: compensation_bands
        # =================================================================
        migrations.CreateModel(
            name='CompensationBandModel',
            fields=audit_fields() + [
                ('name', models.CharField(max_length=100, db_index=True)),
                ('min_salary', models.DecimalField(max_digits=18, decimal_places=2)),
                ('max_salary', models.DecimalField(max_digits=18, decimal_places=2)),
            ],
            options={
                'db_table': 'compensation_bands',
                'verbose_name': 'Faixa Salarial',
                'verbose_name_plural': 'Faixas Salariais',
                'abstract': False,
            },
        ),

        # =================================================================
        # Tabela: job_positions
        # =================================================================
        migrations.CreateModel(
            name='JobPositionModel',
            fields=audit_fields() + [
                ('title', models.CharField(max_length=100, db_index=True)),
                ('number', models.CharField(max_length=100, unique=True)),
                ('description', models.TextField(blank=True, default='')),
                ('unit', models.ForeignKey(
                    null=True,
                    on_delete=django.db.models.deletion.DO_NOTHING,
                    db_constraint=False,
                    related_name='positions',
                    to='hr.organizationalunitmodel',
                )),
                ('band', models.ForeignKey(
                    null=True,
                    on_delete=django.db.models.deletion.DO_NOTHING,
                    db_constraint=False,
                    related_name='positions',
                    to='hr.compensationbandmodel',
                )),
            ],
            options={
                'db_table': 'job_positions',
                'verbose_name': 'Cargo',
                'verbose_name_plural': 'Cargos',
                'abstract': False,
            },
        ),

        # =================================================================
        # Tabela: workers
        # =================================================================
        migrations.CreateModel(
            name='WorkerModel',
            fields=audit_fields() + [
                ('first_name', models.CharField(max_length=100, db_index=True)),
                ('middle_name', models.CharField(max_length=100, null=True, blank=True)),
                ('last_name', models.CharField(max_length=100, db_index=True)),
                ('email', models.CharField(max_length=254)),
                ('worker_number', models.CharField(max_length=50, unique=True)),
                ('prefix', models.CharField(max_length=20, null=True, blank=True)),
                ('phone', models.CharField(max_length=50, null=True, blank=True)),
                ('salary', models.DecimalField(max_digits=18, decimal_places=2)),
                ('birthday', models.DateField(null=True, blank=True)),
                ('gender', models.CharField(
                    max_length=10,
                    choices=[('Male', 'Male'), ('Female', 'Female')],
                    default='Male',
                )),
                ('position', models.ForeignKey(
                    null=True,
                    on_delete=django.db.models.deletion.DO_NOTHING,
                    db_constraint=False,
                    related_name='workers',
                    to='hr.jobpositionmodel',
                )),
            ],
            options={
                'db_table': 'workers',
                'verbose_name': 'Trabalhador',
                'verbose_name_plural': 'Trabalhadores',
                'abstract': False,
                'indexes': [
                    models.Index(fields=['last_name', 'first_name'], name='workers_last_first_idx'),
                ],
            },
        ),
    ]
