"""
Testes do Catálogo de Campos.

Coverage:
- canonical_fields
- validate_fields / resolve_fields
- select_fields
- resolve_path
"""

from types import SimpleNamespace

import pytest

from src.core.shared.query.fields import (
    OutputShape,
    ShapeField,
    canonical_fields,
    resolve_fields,
    resolve_path,
    select_fields,
    validate_fields,
)


@pytest.fixture
def shape():
    return OutputShape("Sample", [
        ShapeField("id", "id"),
        ShapeField("firstName", "first_name"),
        ShapeField("lastName", "last_name"),
        ShapeField("positionTitle", "position.title"),
    ])


class TestCanonicalFields:
    """Testes para canonical_fields."""

    def test_ordem_de_declaracao(self, shape):
        """Deve retornar os campos na ordem declarada."""
        assert canonical_fields(shape) == ["id", "firstName", "lastName", "positionTitle"]


class TestValidateFields:
    """Testes para validate_fields."""

    def test_descarta_campos_desconhecidos(self, shape):
        """Deve descartar silenciosamente campos inexistentes."""
        assert validate_fields(shape, "firstName,salary,id") == "firstName,id"

    def test_preserva_ordem_do_cliente(self, shape):
        """Deve manter a ordem enviada, não a canônica."""
        assert validate_fields(shape, "lastName,id,firstName") == "lastName,id,firstName"

    def test_sem_diferenciar_maiusculas(self, shape):
        """Deve aceitar qualquer caixa e emitir a grafia canônica."""
        assert validate_fields(shape, "FIRSTNAME, lastname") == "firstName,lastName"

    @pytest.mark.parametrize("candidates", [None, "", "  ", ",,"])
    def test_entrada_vazia(self, shape, candidates):
        """Entrada vazia resulta em string vazia."""
        assert validate_fields(shape, candidates) == ""

    def test_tudo_invalido_retorna_vazio(self, shape):
        """Todos inválidos sinaliza fallback para os campos canônicos."""
        assert validate_fields(shape, "salary,age") == ""

    def test_repassa_direcao_de_ordenacao(self, shape):
        """Sufixo após o nome do campo é repassado sem validação."""
        assert validate_fields(shape, "lastname desc,salary asc,id") == "lastName desc,id"

    def test_resultado_e_subsequencia_dos_candidatos(self, shape):
        """O resultado é subsequência dos candidatos restrita ao shape."""
        candidates = ["foo", "id", "bar", "lastName", "firstName", "baz"]
        result = validate_fields(shape, ",".join(candidates)).split(",")

        canonical = {name.lower() for name in canonical_fields(shape)}
        assert all(name.lower() in canonical for name in result)
        positions = [candidates.index(name) for name in result]
        assert positions == sorted(positions)


class TestResolveFields:
    """Testes para resolve_fields."""

    def test_fallback_para_canonicos(self, shape):
        """Sem campos válidos, usa todos os canônicos."""
        assert resolve_fields(shape, "unknown") == "id,firstName,lastName,positionTitle"

    def test_mantem_selecao_valida(self, shape):
        assert resolve_fields(shape, "id") == "id"

    def test_descarta_sufixo_na_selecao(self, shape):
        """Deve manter apenas o nome do campo quando vem com sufixo."""
        assert resolve_fields(shape, "lastname desc,id") == "lastName,id"


class TestSelectFields:
    """Testes para select_fields."""

    def test_lista_vazia_usa_canonicos(self, shape):
        assert [f.name for f in select_fields(shape, None)] == canonical_fields(shape)

    def test_ignora_desconhecidos(self, shape):
        assert [f.name for f in select_fields(shape, "lastName,nope")] == ["lastName"]

    def test_token_com_sufixo(self, shape):
        assert [f.name for f in select_fields(shape, "lastName asc")] == ["lastName"]


class TestResolvePath:
    """Testes para resolve_path."""

    def test_caminho_pontilhado(self):
        record = SimpleNamespace(position=SimpleNamespace(title="Engineer"))
        assert resolve_path(record, "position.title") == "Engineer"

    def test_navegacao_ausente_retorna_none(self):
        record = SimpleNamespace(position=None)
        assert resolve_path(record, "position.title") is None
