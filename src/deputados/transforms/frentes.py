"""Flatten function for parliamentary fronts (GET /deputados/{id}/frentes)."""


def flatten_frente(rec: dict) -> dict:
    return {
        "frente_id":      rec.get("id"),
        "titulo":         rec.get("titulo"),
        "id_legislatura": rec.get("idLegislatura"),
        "uri":            rec.get("uri"),
    }
