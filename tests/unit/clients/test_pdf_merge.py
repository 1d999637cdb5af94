"""
Tests for the PDF merge client.
"""

import httpx
import pytest

from selectpdf.clients import PdfMergeClient
from selectpdf.exceptions import ApiStatusError, ValidationError
from tests.helpers.api import multipart_fields

PDF_MERGE = "/api2/pdfmerge/"


@pytest.fixture
def client(client_kwargs):
    return PdfMergeClient(**client_kwargs)


class TestPdfMerge:
    async def test_merges_files_and_urls(self, server, client, pdf_file):
        server.queue(
            PDF_MERGE, httpx.Response(200, content=b"%PDF-merged", headers={"selectpdf-api-pages": "5"})
        )

        client.add_file(pdf_file)
        client.add_url_file("https://example.com/b.pdf", password="pw")

        pdf = await client.set_doc_title("Merged").save()

        assert pdf == b"%PDF-merged"
        assert client.get_number_of_pages() == 5
        fields = multipart_fields(server.requests[0])
        assert fields["files_no"] == b"2"
        assert fields["file_1"] == pdf_file.read_bytes()
        assert fields["url_2"] == b"https://example.com/b.pdf"
        assert fields["password_2"] == b"pw"
        assert fields["doc_title"] == b"Merged"
        assert "password_1" not in fields

    async def test_file_list_reset_after_save(self, server, client, pdf_file):
        server.queue(PDF_MERGE, httpx.Response(200, content=b"%PDF"))

        client.add_file(pdf_file).add_url_file("https://example.com/b.pdf")
        await client.save()

        assert client.files == {}
        assert "url_2" not in client.parameters

        client.add_file(pdf_file)
        await client.save()
        fields = multipart_fields(server.requests[1])
        assert fields["files_no"] == b"1"
        assert "url_2" not in fields

    async def test_file_list_reset_after_failure(self, server, client, pdf_file):
        server.queue(PDF_MERGE, httpx.Response(400, text="Invalid PDF"))

        client.add_file(pdf_file, password="pw")
        with pytest.raises(ApiStatusError, match=r"\(400\) Invalid PDF"):
            await client.save()

        assert client.files == {}
        assert "password_1" not in client.parameters

    async def test_save_to_file_as_async_job(self, server, client, pdf_file, tmp_path, sleeps):
        server.queue(PDF_MERGE, httpx.Response(202, headers={"selectpdf-api-jobid": "m1"}))
        server.queue(
            "/api2/asyncjob/",
            httpx.Response(202, headers={"selectpdf-api-jobid": "m1"}),
            httpx.Response(200, content=b"%PDF-merged"),
        )
        target = tmp_path / "merged.pdf"

        client.add_file(pdf_file)
        await client.save_to_file(target, async_job=True)

        assert target.read_bytes() == b"%PDF-merged"
        assert sleeps == [3]

    def test_invalid_url(self, client):
        with pytest.raises(ValidationError):
            client.add_url_file("ftp://example.com/a.pdf")
        assert "url_1" not in client.parameters
