"""
Tests for product file uploads
"""

import pytest

from storefront.api.upload import file_extension, storage_key
from storefront.services.catalog import CatalogService
from tests.conftest import signed


class TestStorageKeys:

    def test_image_key(self):
        assert storage_key(5, "image", "jpg", 2) == "products/5/images/product-5-image-2.jpg"

    def test_model_key(self):
        assert storage_key(5, "ar-model", "glb") == "products/5/ar/product-5-model.glb"

    @pytest.mark.parametrize("filename, expected", [
        ("sofa.JPG", "jpg"),
        ("model.final.usdz", "usdz"),
        ("noextension", "bin"),
        (None, "bin"),
    ])
    def test_file_extension(self, filename, expected):
        assert file_extension(filename) == expected


class TestUploadEndpoint:
    """POST /api/upload"""

    async def test_upload_image(self, client, s3_client, company, make_product):
        product = await make_product(company)

        response = await client.post(
            "/api/upload",
            data={"productId": str(product.id), "type": "image", "index": "2"},
            files={"file": ("sofa.png", b"\x89PNG data", "image/png")},
        )

        assert response.status_code == 200
        key = f"products/{product.id}/images/product-{product.id}-image-2.png"
        assert response.json() == {"url": signed(key), "key": key}
        assert s3_client.objects[key]["body"] == b"\x89PNG data"
        assert s3_client.objects[key]["content_type"] == "image/png"

        stored = await client.get(f"/api/products/{product.id}")
        assert stored.json()["image_2"] == signed(key)

    async def test_upload_ar_model(self, client, s3_client, company, make_product):
        product = await make_product(company)

        response = await client.post(
            "/api/upload",
            data={"productId": str(product.id), "type": "ar-model"},
            files={"file": ("sofa.glb", b"glTF", "application/octet-stream")},
        )

        assert response.status_code == 200
        key = f"products/{product.id}/ar/product-{product.id}-model.glb"
        assert s3_client.objects[key]["content_type"] == "model/glb"

        stored = (await client.get(f"/api/products/{product.id}")).json()
        assert stored["glb_file"] == signed(key)
        assert stored["has_ar"] is True

    async def test_missing_file(self, client, company, make_product):
        product = await make_product(company)

        response = await client.post(
            "/api/upload",
            data={"productId": str(product.id), "type": "image", "index": "1"},
        )

        assert response.status_code == 400

    async def test_invalid_type(self, client, company, make_product):
        product = await make_product(company)

        response = await client.post(
            "/api/upload",
            data={"productId": str(product.id), "type": "video"},
            files={"file": ("clip.mp4", b"data", "video/mp4")},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid file type"

    async def test_image_index_out_of_range(self, client, company, make_product):
        product = await make_product(company)

        response = await client.post(
            "/api/upload",
            data={"productId": str(product.id), "type": "image", "index": "5"},
            files={"file": ("sofa.png", b"data", "image/png")},
        )

        assert response.status_code == 400

    async def test_unknown_product(self, client, s3_client):
        response = await client.post(
            "/api/upload",
            data={"productId": "999", "type": "image", "index": "1"},
            files={"file": ("sofa.png", b"data", "image/png")},
        )

        assert response.status_code == 404
        assert s3_client.objects == {}

    async def test_product_removed_before_attach(self, client, monkeypatch, company, make_product):
        product = await make_product(company)

        async def product_gone(self, product_id, field, key):
            return None

        monkeypatch.setattr(CatalogService, "attach_file", product_gone)

        response = await client.post(
            "/api/upload",
            data={"productId": str(product.id), "type": "image", "index": "1"},
            files={"file": ("sofa.png", b"data", "image/png")},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"
