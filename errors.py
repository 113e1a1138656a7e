"""Exceções do serviço. Convertidas em respostas HTTP apenas nas rotas."""


class ValidationError(ValueError):
    """Campo obrigatório ausente na requisição (HTTP 400)."""


class ConfigError(RuntimeError):
    """Configuração obrigatória ausente, ex: API key (HTTP 500 opaco)."""


class UpstreamError(RuntimeError):
    """Falha de uma API externa (LLM ou geolocalização).

    `body` guarda a resposta bruta para o log do servidor; nunca vai para o cliente.
    """

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body
