from datetime import datetime

from tests.base import *  # noqa: F401,F403


class RestAuthorizationTests(MototrackApiBase):
    def test_missing_token_is_unauthorized(self):
        response = self.client.get("/api/motos/filtro")
        self.assertEqual(response.status_code, 401)

    def test_garbage_token_is_unauthorized(self):
        response = self.client.get("/api/motos/filtro", headers={"Authorization": "Bearer nope"})
        self.assertEqual(response.status_code, 401)

    def test_user_can_read_but_not_write(self):
        headers = self._auth_headers("USER")
        self.assertEqual(self.client.get("/api/filiais/filtro", headers=headers).status_code, 200)
        denied = self.client.post("/api/filiais", headers=headers, json={"nome": "Filial Sul"})
        self.assertEqual(denied.status_code, 403)
        self.assertEqual(denied.json()["detail"], "Você não tem permissão para realizar esta ação.")

    def test_unknown_role_cannot_read(self):
        response = self.client.get("/api/motos/filtro", headers=self._auth_headers("VISITANTE"))
        self.assertEqual(response.status_code, 403)


class MotoRestTests(MototrackApiBase):
    def setUp(self):
        super().setUp()
        self.filial_id = self._seed_filial()
        self._seed_moto("AAA1A19", ano=2019, status="MANUTENCAO")
        self._seed_moto("BBB2B21", ano=2021, status="DISPONIVEL", filial_id=self.filial_id)
        self._seed_moto("CCC3C23", ano=2023, status="DISPONIVEL")
        self.headers = self._auth_headers("USER")

    def test_filter_endpoint_returns_page_envelope(self):
        response = self.client.get("/api/motos/filtro", headers=self.headers, params={"status": "disponivel"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["total"], 2)
        self.assertEqual(body["page"], 0)
        self.assertEqual(body["size"], settings.DEFAULT_PAGE_SIZE)
        self.assertEqual(body["total_pages"], 1)
        # Default sort is placa descending.
        self.assertEqual([item["placa"] for item in body["items"]], ["CCC3C23", "BBB2B21"])

    def test_filter_endpoint_binds_ranges_and_relations(self):
        response = self.client.get(
            "/api/motos/filtro",
            headers=self.headers,
            params={"ano_min": 2020, "ano_max": 2022, "filial_id": str(self.filial_id)},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["placa"] for item in response.json()["items"]], ["BBB2B21"])

    def test_paging_parameters(self):
        response = self.client.get(
            "/api/motos/filtro", headers=self.headers, params={"page": 1, "size": 2, "sort": "ano,asc"}
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual([item["placa"] for item in body["items"]], ["CCC3C23"])
        self.assertEqual(body["total"], 3)
        self.assertEqual(body["total_pages"], 2)

    def test_bad_page_requests_are_400(self):
        cases = [
            {"sort": "cor,asc"},
            {"sort": "placa,sideways"},
            {"size": 0},
            {"size": settings.MAX_PAGE_SIZE + 1},
            {"page": -1},
        ]
        for params in cases:
            with self.subTest(params=params):
                response = self.client.get("/api/motos/filtro", headers=self.headers, params=params)
                self.assertEqual(response.status_code, 400)

    def test_bad_sort_field_names_it_in_detail(self):
        response = self.client.get("/api/motos/filtro", headers=self.headers, params={"sort": "cor"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("cor", response.json()["detail"])

    def test_admin_write_cycle(self):
        admin = self._auth_headers("ADMIN")
        created = self.client.post(
            "/api/motos",
            headers=admin,
            json={"placa": "new1n25", "modelo": "Biz", "marca": "Honda", "ano": 2025, "status": "DISPONIVEL"},
        )
        self.assertEqual(created.status_code, 201)
        moto = created.json()
        self.assertEqual(moto["placa"], "NEW1N25")
        UUID(moto["id"])

        updated = self.client.put(
            f"/api/motos/{moto['id']}",
            headers=admin,
            json={
                "placa": "NEW1N25",
                "modelo": "Biz 125",
                "marca": "Honda",
                "ano": 2025,
                "status": "MANUTENCAO",
                "filial_id": str(self.filial_id),
            },
        )
        self.assertEqual(updated.status_code, 200)
        self.assertEqual(updated.json()["filial_id"], str(self.filial_id))

        fetched = self.client.get(f"/api/motos/{moto['id']}", headers=self.headers)
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(fetched.json()["modelo"], "Biz 125")

        deleted = self.client.delete(f"/api/motos/{moto['id']}", headers=admin)
        self.assertEqual(deleted.status_code, 204)

        missing = self.client.get(f"/api/motos/{moto['id']}", headers=self.headers)
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json()["detail"], "Moto não encontrada")

    def test_unknown_filial_on_create_is_404(self):
        response = self.client.post(
            "/api/motos",
            headers=self._auth_headers("ADMIN"),
            json={
                "placa": "NEW1N25",
                "modelo": "Biz",
                "marca": "Honda",
                "ano": 2025,
                "status": "DISPONIVEL",
                "filial_id": str(uuid4()),
            },
        )
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "Filial não encontrada")

    def test_duplicate_placa_is_409(self):
        response = self.client.post(
            "/api/motos",
            headers=self._auth_headers("ADMIN"),
            json={"placa": "aaa1a19", "modelo": "Biz", "marca": "Honda", "ano": 2025, "status": "DISPONIVEL"},
        )
        self.assertEqual(response.status_code, 409)

    def test_invalid_payload_is_422(self):
        response = self.client.post(
            "/api/motos",
            headers=self._auth_headers("ADMIN"),
            json={"placa": " ", "modelo": "Biz", "marca": "Honda", "ano": 1990, "status": "DISPONIVEL"},
        )
        self.assertEqual(response.status_code, 422)


class EventoRestTests(MototrackApiBase):
    def test_day_filters_from_query_string(self):
        moto_id = self._seed_moto("EVT1E22")
        self._seed_evento(moto_id, datetime(2025, 5, 10, 9, 0), motivo="Manhã")
        self._seed_evento(moto_id, datetime(2025, 5, 11, 23, 50), motivo="Noite")
        headers = self._auth_headers("USER")

        same_day = self.client.get(
            "/api/eventos/filtro", headers=headers, params={"data_inicio": "2025-05-10", "data_fim": "2025-05-10"}
        )
        self.assertEqual(same_day.status_code, 200)
        self.assertEqual([item["motivo"] for item in same_day.json()["items"]], ["Manhã"])

        two_days = self.client.get(
            "/api/eventos/filtro", headers=headers, params={"data_inicio": "2025-05-10", "data_fim": "2025-05-11"}
        )
        # Default sort is data_hora descending.
        self.assertEqual([item["motivo"] for item in two_days.json()["items"]], ["Noite", "Manhã"])
        self.assertEqual(two_days.json()["items"][0]["moto_placa"], "EVT1E22")

    def test_create_evento_for_unknown_moto_is_404(self):
        response = self.client.post(
            "/api/eventos",
            headers=self._auth_headers("ADMIN"),
            json={"moto_id": str(uuid4()), "tipo": "ENTRADA", "motivo": "Chegada"},
        )
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "Moto não encontrada")


class UsuarioAndFilialRestTests(MototrackApiBase):
    def test_usuario_listing_hides_senha(self):
        self._seed_usuario("Ana", "ana@mottu.com")
        response = self.client.get("/api/usuarios/filtro", headers=self._auth_headers("ADMIN"), params={"nome": "an"})
        self.assertEqual(response.status_code, 200)
        [item] = response.json()["items"]
        self.assertEqual(item["email"], "ana@mottu.com")
        self.assertNotIn("senha", item)

    def test_delete_filial_with_motos_is_409(self):
        filial_id = self._seed_filial()
        self._seed_moto("REF1F22", filial_id=filial_id)
        response = self.client.delete(f"/api/filiais/{filial_id}", headers=self._auth_headers("ADMIN"))
        self.assertEqual(response.status_code, 409)

    def test_agendamento_listing(self):
        moto_id = self._seed_moto("AGD1A22")
        self._seed_agendamento(moto_id, datetime(2025, 6, 1, 9, 0), descricao="Troca de óleo")
        response = self.client.get(
            "/api/agendamentos/filtro", headers=self._auth_headers("USER"), params={"descricao": "óleo"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["total"], 1)


class LoginTests(MototrackApiBase):
    def test_login_maps_perfil_to_role(self):
        self._seed_usuario("Gestora", "gestora@mottu.com", perfil="GESTOR", senha="segredo123")
        self._seed_usuario("Operador", "op@mottu.com", perfil="OPERADOR", senha="segredo123")

        gestor = self.client.post("/api/auth/login", json={"email": "gestora@mottu.com", "senha": "segredo123"})
        self.assertEqual(gestor.status_code, 200)
        self.assertEqual(gestor.json()["role"], "ADMIN")
        self.assertEqual(gestor.json()["token_type"], "Bearer")

        operador = self.client.post("/api/auth/login", json={"email": "op@mottu.com", "senha": "segredo123"})
        self.assertEqual(operador.json()["role"], "USER")

        token = operador.json()["access_token"]
        listing = self.client.get("/api/motos/filtro", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(listing.status_code, 200)

    def test_wrong_password_is_401(self):
        self._seed_usuario("Ana", "ana@mottu.com", senha="segredo123")
        response = self.client.post("/api/auth/login", json={"email": "ana@mottu.com", "senha": "errada"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "Email ou senha inválidos")
