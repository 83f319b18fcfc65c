"""
Exceções de Domínio do serviço de RH.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada, detectada antes do core)
    └── EntityNotFoundError (identificador não resolve para um registro)

Falhas de armazenamento (ex: django.db.DatabaseError) e cancelamento
(asyncio.CancelledError) NÃO são convertidas: propagam sem alteração.
"""

from typing import List, Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            await service.execute(worker_id)
        except DomainException as e:
            return Response.from_exception(e)
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Levantada pelos validadores declarativos que ficam antes do core
    (campos obrigatórios, tamanhos máximos, unicidade). O motor de
    consulta nunca levanta este erro: tokens de campo inválidos são
    descartados silenciosamente.

    Example:
        if not command.first_name:
            raise ValidationError("FirstName is required.", field="first_name")
    """

    def __init__(
        self,
        message: str,
        field: str = None,
        errors: Optional[List[str]] = None,
    ):
        self.field = field
        self.errors = list(errors) if errors else [message]
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        result["errors"] = list(self.errors)
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado. A mensagem
    segue o formato "<Recurso> Not Found." visível ao cliente.

    Example:
        worker = await repo.get_by_id(worker_id)
        if worker is None:
            raise EntityNotFoundError.for_resource("Worker", worker_id)
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    @classmethod
    def for_resource(cls, entity_type: str, entity_id: str = None) -> "EntityNotFoundError":
        """Cria o erro com a mensagem padrão do recurso."""
        return cls(
            f"{entity_type} Not Found.",
            entity_type=entity_type,
            entity_id=entity_id,
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result
