"""Flatten function for the deputy roster (GET /deputados).

The list endpoint already carries everything the roster needs (name, party,
state, photo, e-mail); there is no per-deputy detail fetch.
"""


def flatten_deputado(rec: dict) -> dict:
    """Flatten one record from GET /deputados."""
    return {
        "deputado_id":    str(rec.get("id") or ""),
        "nome":           rec.get("nome") or "",
        "sigla_partido":  rec.get("siglaPartido"),
        "sigla_uf":       rec.get("siglaUf"),
        "id_legislatura": rec.get("idLegislatura"),
        "url_foto":       rec.get("urlFoto"),
        "email":          rec.get("email"),
    }
