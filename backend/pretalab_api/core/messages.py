"""Response Messages — centralized pt-BR text returned to API callers.

Invariants:
    - All strings are pure data (no IO, no computation)
    - One ResourceMessages entry per Resource; routes never hardcode text
    - Field explanations live with the schemas (schemas/task.py, schemas/transaction.py)
"""

from dataclasses import dataclass

from pretalab_api.core.domain_types import Resource


@dataclass(frozen=True)
class ResourceMessages:
    """Fixed messages for one collection's routes."""
    label: str
    invalid_id: str
    not_found: str
    list_failed: str
    get_failed: str
    create_failed: str
    update_failed: str
    delete_failed: str


RESOURCE_MESSAGES: dict[Resource, ResourceMessages] = {
    Resource.TASK: ResourceMessages(
        label="tarefa",
        invalid_id="ID de tarefa inválido.",
        not_found="Tarefa não encontrada",
        list_failed="Erro interno ao buscar tarefas.",
        get_failed="Erro interno ao buscar tarefa.",
        create_failed="Erro interno ao criar tarefa.",
        update_failed="Erro interno ao atualizar tarefa.",
        delete_failed="Erro interno ao deletar tarefa.",
    ),
    Resource.TRANSACTION: ResourceMessages(
        label="transação",
        invalid_id="ID de transação inválido.",
        not_found="Transação não encontrada",
        list_failed="Erro interno ao buscar transações.",
        get_failed="Erro interno ao buscar transação.",
        create_failed="Erro interno ao criar transação.",
        update_failed="Erro interno ao atualizar transação.",
        delete_failed="Erro interno ao deletar transação.",
    ),
}

WELCOME_TEXT = "Bem-vindo à API de Tarefas, Transações e Gemini!"

PROMPT_REQUIRED = "O prompt é obrigatório no corpo da requisição."
GENERATION_FAILED = "Erro interno ao gerar texto."
INVALID_BODY = "Corpo da requisição inválido."
INTERNAL_ERROR = "Erro interno do servidor."


def generation_auth_failed(credential_env_var: str) -> str:
    """401 text pointing the caller at the credential variable of the active provider."""
    return (
        "Erro de autenticação com o serviço de geração de texto: "
        "API key inválida ou ausente. Certifique-se de que a variável de "
        f"ambiente {credential_env_var} está configurada corretamente."
    )
