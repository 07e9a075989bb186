"""
Exceções de Domínio do Pátio Manager.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)        → HTTP 400
    ├── EntityNotFoundError (entidade não existe)     → HTTP 404
    └── ConflictError (violação de unicidade no banco) → HTTP 409
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            moto.atualizar_dados_basicos("", "CG 160", 2021)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
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

    Lançada por value objects e entidades quando os dados
    fornecidos não atendem às regras do domínio.

    Example:
        if numero <= 0:
            raise ValidationError(
                "Número da vaga deve ser maior que zero.",
                field="numero",
            )
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado.

    Example:
        moto = repo.get_by_id(moto_id)
        if not moto:
            raise EntityNotFoundError(f"Moto {moto_id} não encontrada")
    """

    def __init__(self, message: str, entity_type: str = None, entity_id=None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        return result


class ConflictError(DomainException):
    """
    Violação de unicidade detectada pela camada de persistência.

    O domínio não verifica unicidade antes de gravar: o banco
    rejeita a escrita e o repositório traduz a falha nesta exceção.

    Example:
        try:
            model.save()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise ConflictError("Já existe a vaga nº 12 no pátio 'A'.")
            raise
    """

    def __init__(self, message: str, constraint: str = None):
        self.constraint = constraint
        super().__init__(message, "CONFLICT")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.constraint:
            result["constraint"] = self.constraint
        return result
