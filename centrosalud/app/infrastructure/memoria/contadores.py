from __future__ import annotations

from collections import Counter


class GeneradorIdsRepositorio:
    """
    Numeración de instancias de repositorio, un contador por tipo.

    Cada repositorio recibe su número al construirse. El contador vive en
    esta instancia (no en la clase), así que dos generadores no se pisan y
    reiniciar() deja la numeración como recién creada.
    """

    def __init__(self) -> None:
        self._contadores: Counter[str] = Counter()

    def siguiente(self, tipo: str) -> int:
        self._contadores[tipo] += 1
        return self._contadores[tipo]

    def actual(self, tipo: str) -> int:
        return self._contadores[tipo]

    def reiniciar(self) -> None:
        self._contadores.clear()
