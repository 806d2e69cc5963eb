"""Flatten function for deputy events (GET /deputados/{id}/eventos).

An event happens either inside the Chamber (``localCamara`` with building,
floor and room) or somewhere else (``localExterno`` free text). Both shapes
are kept side by side; the one that does not apply stays None.
"""


def flatten_evento(rec: dict) -> dict:
    """Flatten one record from GET /deputados/{id}/eventos."""
    local = rec.get("localCamara") or {}
    orgaos = rec.get("orgaos") or []
    return {
        "evento_id":        str(rec.get("id") or ""),
        "descricao":        rec.get("descricao"),
        "descricao_tipo":   rec.get("descricaoTipo"),
        "situacao":         rec.get("situacao"),
        "data_hora_inicio": rec.get("dataHoraInicio"),
        "data_hora_fim":    rec.get("dataHoraFim"),
        "local_nome":       local.get("nome"),
        "local_predio":     local.get("predio"),
        "local_andar":      local.get("andar"),
        "local_sala":       local.get("sala"),
        "local_externo":    rec.get("localExterno"),
        "orgaos":           [o.get("sigla") or o.get("nome") or "" for o in orgaos],
        "url_registro":     rec.get("urlRegistro"),
    }
