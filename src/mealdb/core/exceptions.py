"""Error único del cliente.

Cualquier fallo (red, cuerpo ilegible, JSON inválido o resultado vacío) se
colapsa en `MealDBError`. Quien llama solo puede distinguir los casos por el
mensaje o por `cause`.
"""

from __future__ import annotations

NO_RESULTS_MESSAGE = "no results found"


class MealDBError(Exception):
    """Fallo de una llamada a la API de TheMealDB."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    @classmethod
    def no_results(cls) -> "MealDBError":
        return cls(NO_RESULTS_MESSAGE)

    @classmethod
    def wrap(cls, exc: BaseException) -> "MealDBError":
        """Envuelve una excepción subyacente conservando su mensaje."""

        return cls(str(exc) or type(exc).__name__, cause=exc)
