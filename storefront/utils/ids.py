from __future__ import annotations


def normalize_id(value: int | float | str) -> str:
    """
    Forma canónica para comparar identificadores entre endpoints.
    El backend devuelve el mismo id con distinto casing según el endpoint, por eso
    se compara en minúsculas tras convertir a str. No recorta espacios.
    Un float entero (10.0) se trata como el int 10, igual que lo imprime JSON/JS.
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).lower()


def has_id(value) -> bool:
    # null y "" no identifican ningún producto
    return value is not None and value != ""
