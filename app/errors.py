class AssistantError(Exception):
    status_code = 500
    message = "Erro interno."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingTextError(AssistantError):
    status_code = 400
    message = "Texto não enviado."


class ConfigurationError(AssistantError):
    status_code = 500
    message = "Configuração de servidor ausente"


class UpstreamAIError(AssistantError):
    status_code = 502
    message = "Erro na IA"


class InvalidAIResponseError(AssistantError):
    status_code = 502
    message = "Resposta inválida da IA"
