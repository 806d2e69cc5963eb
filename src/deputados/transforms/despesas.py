"""Flatten function for deputy CEAP expense records.

  - Values are already floats (not Brazilian-locale strings).
  - valor_liquido defaults to 0.0 so totals can be summed without guards;
    gross and glosa values keep None when the API omits them.
  - codDocumento is the natural key of a receipt.
"""


def flatten_despesa(rec: dict) -> dict:
    """Flatten one expense record from GET /deputados/{id}/despesas."""
    return {
        "cod_documento":       str(rec.get("codDocumento") or ""),
        "ano":                 rec.get("ano"),
        "mes":                 rec.get("mes"),
        "tipo_despesa":        rec.get("tipoDespesa"),
        "tipo_documento":      rec.get("tipoDocumento"),
        "data_documento":      rec.get("dataDocumento"),
        "num_documento":       rec.get("numDocumento"),
        "valor_documento":     rec.get("valorDocumento"),
        "valor_liquido":       float(rec.get("valorLiquido") or 0),
        "valor_glosa":         rec.get("valorGlosa"),
        "url_documento":       rec.get("urlDocumento"),
        "nome_fornecedor":     rec.get("nomeFornecedor"),
        "cnpj_cpf_fornecedor": rec.get("cnpjCpfFornecedor"),
        "num_ressarcimento":   rec.get("numRessarcimento") or None,
    }
