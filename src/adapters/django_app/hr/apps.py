"""
Configuração do Django App de RH.
"""

from django.apps import AppConfig


class HRConfig(AppConfig):
    """Configuração do app HR (unidades, cargos, faixas e trabalhadores)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.hr'
    label = 'hr'
    verbose_name = 'Registros de RH'
