import json
from datetime import datetime, timezone
import unittest

import httpx

from patient_client.gateway import GatewayError, PatientGateway
from patient_client.models import PatientRecord

RECORD = {
    "id": "a" * 32,
    "firstName": "Ann",
    "lastName": "Lee",
    "email": "a@x.com",
    "allergies": ["Latex"],
    "medications": [],
    "modelResult": None,
    "modelConfidence": None,
    "status": "pending",
    "audioFileUrl": "https://media.example.com/a.wav",
    "videoFileUrl": "https://media.example.com/a.mp4",
    "createdAt": "2025-04-15T08:30:00Z",
}


class PatientGatewayTest(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.requests = []
        self.reply = httpx.Response(200, json={"success": True, "data": [RECORD]})

    def _gateway(self):
        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return self.reply
        return PatientGateway(base_url="http://dashboard.test/api/", transport=httpx.MockTransport(handler))

    async def test_list_parses_records(self):
        patients = await self._gateway().list_patients()
        self.assertEqual(len(patients), 1)
        self.assertIsInstance(patients[0], PatientRecord)
        self.assertEqual(patients[0].first_name, "Ann")
        self.assertEqual(patients[0].created_at, datetime(2025, 4, 15, 8, 30, tzinfo=timezone.utc))

        request = self.requests[0]
        self.assertEqual(request.method, "GET")
        self.assertEqual(str(request.url), "http://dashboard.test/api/patients")

    async def test_create_posts_the_fields(self):
        self.reply = httpx.Response(201, json={"success": True, "data": RECORD})
        record = await self._gateway().create_patient({"firstName": "Ann", "allergies": ["Latex"]})

        request = self.requests[0]
        self.assertEqual(request.method, "POST")
        self.assertEqual(json.loads(request.content), {"firstName": "Ann", "allergies": ["Latex"]})
        self.assertEqual(record.id, RECORD["id"])

    async def test_update_sends_only_set_fields_of_a_model(self):
        self.reply = httpx.Response(200, json={"success": True, "data": RECORD})
        update = PatientRecord(id=RECORD["id"], modelResult="Flu")
        await self._gateway().update_patient(RECORD["id"], update)

        request = self.requests[0]
        self.assertEqual(request.method, "PUT")
        self.assertEqual(request.url.path, f"/api/patients/{RECORD['id']}")
        self.assertEqual(json.loads(request.content), {"id": RECORD["id"], "modelResult": "Flu"})

    async def test_delete_returns_server_message(self):
        self.reply = httpx.Response(200, json={"success": True, "message": "Patient deleted"})
        self.assertEqual(await self._gateway().delete_patient(RECORD["id"]), "Patient deleted")
        self.assertEqual(self.requests[0].method, "DELETE")

    async def test_error_envelope_raises(self):
        self.reply = httpx.Response(404, json={"success": False, "message": "Patient not found"})
        with self.assertRaises(GatewayError) as ctx:
            await self._gateway().get_patient(RECORD["id"])
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.message, "Patient not found")

    async def test_non_json_error_body_raises(self):
        self.reply = httpx.Response(502, text="<html>Bad Gateway</html>")
        with self.assertRaises(GatewayError) as ctx:
            await self._gateway().list_patients()
        self.assertEqual(ctx.exception.status_code, 502)

    async def test_unsuccessful_envelope_with_ok_status_raises(self):
        self.reply = httpx.Response(200, json={"success": False, "message": "Server Error"})
        with self.assertRaises(GatewayError):
            await self._gateway().list_patients()

    async def test_unparseable_records_raise(self):
        self.reply = httpx.Response(200, json={"success": True, "data": [{"firstName": "NoId", "createdAt": "garbage"}]})
        with self.assertRaises(GatewayError) as ctx:
            await self._gateway().list_patients()
        self.assertEqual(ctx.exception.status_code, 200)
        self.assertEqual(ctx.exception.message, "Malformed response from patient service")

    async def test_missing_or_misshapen_data_raises(self):
        for body in ({"success": True}, {"success": True, "data": {"id": "x"}}, {"success": True, "data": None}):
            self.reply = httpx.Response(200, json=body)
            with self.assertRaises(GatewayError):
                await self._gateway().list_patients()

        for body in ({"success": True}, {"success": True, "data": ["not", "a", "record"]}):
            self.reply = httpx.Response(200, json=body)
            with self.assertRaises(GatewayError):
                await self._gateway().get_patient(RECORD["id"])

    async def test_transport_failure_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        gateway = PatientGateway(base_url="http://dashboard.test/api", transport=httpx.MockTransport(handler))
        with self.assertRaises(GatewayError) as ctx:
            await gateway.list_patients()
        self.assertIsNone(ctx.exception.status_code)


if __name__ == "__main__":
    unittest.main()
