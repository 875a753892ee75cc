from datetime import datetime
from uuid import uuid4

from sqlalchemy.dialects import sqlite

from tests.base import *  # noqa: F401,F403
from mototrack.schemas.filters import AgendamentoFilter, FilialFilter, MotoFilter, UsuarioFilter
from mototrack.schemas.pagination import PageRequest
from mototrack.services.agendamento_service import query_agendamentos
from mototrack.services.filial_service import query_filiais
from mototrack.services.filter_compiler import MOTO_FILTER, USUARIO_FILTER
from mototrack.services.moto_service import query_motos
from mototrack.services.usuario_service import query_usuarios


def _placas(page):
    return sorted(item.placa for item in page.items)


class MotoFilterTests(MototrackDbBase):
    def setUp(self):
        super().setUp()
        self.filial_id = self._seed_filial()
        self._seed_moto("AAA1A19", ano=2019, status="MANUTENCAO", modelo="Factor 150", marca="Yamaha")
        self._seed_moto("BBB2B21", ano=2021, status="DISPONIVEL", filial_id=self.filial_id)
        self._seed_moto("CCC3C23", ano=2023, status="disponivel", modelo="Pop 110i")
        self.page_request = PageRequest(page=0, size=20, sort_field="placa")

    def _query(self, filtro):
        return query_motos(self.db, filtro, self.page_request)

    def test_year_lower_bound(self):
        page = self._query(MotoFilter(ano_min=2020))
        self.assertEqual(_placas(page), ["BBB2B21", "CCC3C23"])

    def test_year_between_bounds(self):
        page = self._query(MotoFilter(ano_min=2020, ano_max=2022))
        self.assertEqual(_placas(page), ["BBB2B21"])

    def test_year_bounds_are_inclusive(self):
        page = self._query(MotoFilter(ano_min=2021, ano_max=2021))
        self.assertEqual(_placas(page), ["BBB2B21"])

    def test_year_above_everything_gives_empty_page(self):
        page = self._query(MotoFilter(ano_min=2024))
        self.assertEqual(page.items, [])
        self.assertEqual(page.total, 0)
        self.assertEqual(page.total_pages, 0)

    def test_inverted_range_gives_empty_page(self):
        page = self._query(MotoFilter(ano_min=2023, ano_max=2019))
        self.assertEqual(page.total, 0)

    def test_empty_or_missing_filter_matches_everything(self):
        self.assertEqual(self._query(MotoFilter()).total, 3)
        self.assertEqual(self._query(None).total, 3)

    def test_blank_text_fields_are_ignored(self):
        page = self._query(MotoFilter(placa="", modelo="   ", status=" "))
        self.assertEqual(page.total, 3)

    def test_status_equality_ignores_case(self):
        lower = self._query(MotoFilter(status="disponivel"))
        upper = self._query(MotoFilter(status="DISPONIVEL"))
        self.assertEqual(_placas(lower), ["BBB2B21", "CCC3C23"])
        self.assertEqual(_placas(lower), _placas(upper))

    def test_status_equality_folds_accented_capitals(self):
        self._seed_moto("DDD4D24", ano=2024, status="MANUTENÇÃO")
        self.assertEqual(_placas(self._query(MotoFilter(status="manutenção"))), ["DDD4D24"])
        self.assertEqual(_placas(self._query(MotoFilter(status="Manutenção"))), ["DDD4D24"])

    def test_status_is_not_a_substring_match(self):
        self.assertEqual(self._query(MotoFilter(status="dispon")).total, 0)

    def test_substring_fields_ignore_case(self):
        self.assertEqual(_placas(self._query(MotoFilter(placa="bb2"))), ["BBB2B21"])
        self.assertEqual(_placas(self._query(MotoFilter(marca="YAMA"))), ["AAA1A19"])
        self.assertEqual(_placas(self._query(MotoFilter(modelo="pop"))), ["CCC3C23"])

    def test_like_wildcards_match_literally(self):
        self.assertEqual(self._query(MotoFilter(placa="%")).total, 0)
        self.assertEqual(self._query(MotoFilter(placa="_")).total, 0)

    def test_fields_combine_with_and(self):
        page = self._query(MotoFilter(status="disponivel", ano_max=2022))
        self.assertEqual(_placas(page), ["BBB2B21"])

    def test_relation_filter_by_filial(self):
        page = self._query(MotoFilter(filial_id=self.filial_id))
        self.assertEqual(_placas(page), ["BBB2B21"])

    def test_relation_filter_with_unknown_id_matches_nothing(self):
        page = self._query(MotoFilter(filial_id=uuid4()))
        self.assertEqual(page.total, 0)

    def test_id_filter(self):
        target = self._seed_moto("DDD4D24", ano=2024)
        page = self._query(MotoFilter(id=target))
        self.assertEqual([item.id for item in page.items], [target])

    def test_creation_date_range(self):
        self._seed_moto("EEE5E10", ano=2010, data_criacao=datetime(2001, 1, 15, 12, 0))
        page = self._query(MotoFilter(data_criacao_inicio=datetime(2001, 1, 1), data_criacao_fim=datetime(2001, 2, 1)))
        self.assertEqual(_placas(page), ["EEE5E10"])

    def test_compile_is_repeatable_and_leaves_filter_untouched(self):
        filtro = MotoFilter(placa="bb", status="DISPONIVEL", ano_min=2020)
        before = filtro.model_dump()
        first = MOTO_FILTER.compile(filtro)
        second = MOTO_FILTER.compile(filtro)
        dialect = sqlite.dialect()
        self.assertEqual(str(first.compile(dialect=dialect)), str(second.compile(dialect=dialect)))
        self.assertEqual(filtro.model_dump(), before)
        self.assertEqual(_placas(self._query(filtro)), _placas(self._query(filtro)))

    def test_filter_fields_are_listed_in_rule_order(self):
        self.assertEqual(
            MOTO_FILTER.fields,
            (
                "id",
                "placa",
                "modelo",
                "marca",
                "status",
                "ano_min",
                "ano_max",
                "data_criacao_inicio",
                "data_criacao_fim",
                "filial_id",
            ),
        )


class UsuarioFilterTests(MototrackDbBase):
    def setUp(self):
        super().setUp()
        self._seed_usuario("Ana Souza", "ana@mottu.com", perfil="OPERADOR")
        self._seed_usuario("Bruno Lima", "bruno@mottu.com", perfil="GESTOR")
        self._seed_usuario("Carla Anaya", "carla@example.org", perfil="ADMINISTRADOR")
        self.page_request = PageRequest(page=0, size=20, sort_field="nome")

    def _nomes(self, filtro):
        return [item.nome for item in query_usuarios(self.db, filtro, self.page_request).items]

    def test_nome_contains_ignores_case(self):
        self.assertEqual(self._nomes(UsuarioFilter(nome="ANA")), ["Ana Souza", "Carla Anaya"])

    def test_email_contains(self):
        self.assertEqual(self._nomes(UsuarioFilter(email="mottu")), ["Ana Souza", "Bruno Lima"])

    def test_perfil_equality_ignores_case(self):
        self.assertEqual(self._nomes(UsuarioFilter(perfil="gestor")), ["Bruno Lima"])

    def test_output_never_exposes_senha(self):
        page = query_usuarios(self.db, UsuarioFilter(), self.page_request)
        self.assertNotIn("senha", page.items[0].model_dump())

    def test_compiler_fields(self):
        self.assertEqual(USUARIO_FILTER.fields, ("nome", "email", "perfil"))


class FilialFilterTests(MototrackDbBase):
    def setUp(self):
        super().setUp()
        self._seed_filial(nome="Filial Centro", cidade="São Paulo", estado="SP")
        self._seed_filial(nome="Filial Butantã", cidade="São Paulo", estado="SP")
        self._seed_filial(nome="Filial Savassi", cidade="Belo Horizonte", estado="MG")
        self.page_request = PageRequest(page=0, size=20, sort_field="nome")

    def _nomes(self, filtro):
        return [item.nome for item in query_filiais(self.db, filtro, self.page_request).items]

    def test_cidade_contains(self):
        self.assertEqual(self._nomes(FilialFilter(cidade="paulo")), ["Filial Butantã", "Filial Centro"])

    def test_accented_capitals_fold_like_plain_letters(self):
        self._seed_filial(nome="Filial Tatuapé", cidade="SÃO PAULO", estado="SP")
        paulistas = ["Filial Butantã", "Filial Centro", "Filial Tatuapé"]
        self.assertEqual(self._nomes(FilialFilter(cidade="SÃO PAULO")), paulistas)
        self.assertEqual(self._nomes(FilialFilter(cidade="são paulo")), paulistas)
        self.assertEqual(self._nomes(FilialFilter(cidade="ÃO PAU")), paulistas)
        self.assertEqual(self._nomes(FilialFilter(nome="TATUAPÉ")), ["Filial Tatuapé"])

    def test_estado_and_nome_combine(self):
        self.assertEqual(self._nomes(FilialFilter(estado="mg", nome="sav")), ["Filial Savassi"])
        self.assertEqual(self._nomes(FilialFilter(estado="mg", nome="centro")), [])


class AgendamentoFilterTests(MototrackDbBase):
    def setUp(self):
        super().setUp()
        self.moto_a = self._seed_moto("AAA1A11")
        self.moto_b = self._seed_moto("BBB2B22")
        self._seed_agendamento(self.moto_a, datetime(2025, 6, 1, 9, 0), descricao="Troca de óleo")
        self._seed_agendamento(self.moto_a, datetime(2025, 6, 15, 14, 0), descricao="Revisão geral")
        self._seed_agendamento(self.moto_b, datetime(2025, 7, 2, 10, 0), descricao="Troca de pneu")
        self.page_request = PageRequest(page=0, size=20, sort_field="data_agendada")

    def _descricoes(self, filtro):
        return [item.descricao for item in query_agendamentos(self.db, filtro, self.page_request).items]

    def test_moto_relation_filter(self):
        self.assertEqual(self._descricoes(AgendamentoFilter(moto_id=self.moto_b)), ["Troca de pneu"])

    def test_descricao_contains(self):
        self.assertEqual(self._descricoes(AgendamentoFilter(descricao="TROCA")), ["Troca de óleo", "Troca de pneu"])

    def test_data_agendada_range(self):
        filtro = AgendamentoFilter(
            data_agendada_inicio=datetime(2025, 6, 1, 12, 0),
            data_agendada_fim=datetime(2025, 6, 30, 23, 59),
        )
        self.assertEqual(self._descricoes(filtro), ["Revisão geral"])

    def test_output_carries_moto_placa(self):
        page = query_agendamentos(self.db, AgendamentoFilter(moto_id=self.moto_b), self.page_request)
        self.assertEqual(page.items[0].moto_placa, "BBB2B22")
