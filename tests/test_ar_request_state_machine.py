"""
Unit tests for AR request state machine
"""

import pytest

from storefront.core.exceptions import InvalidTransitionError
from storefront.models import ARRequest, ARRequestStatus


class TestARRequestStateMachine:
    """Test AR request state machine transitions"""

    def test_initial_state(self):
        """Test request starts in PENDING status"""
        ar_request = ARRequest(product=1, shop=1)

        assert ar_request.status == ARRequestStatus.PENDING
        assert ar_request.approved_date is None
        assert ar_request.rejected_date is None

    def test_transition_to_approved(self):
        ar_request = ARRequest(product=1, shop=1)

        ar_request.transition_to_approved()

        assert ar_request.status == ARRequestStatus.APPROVED
        assert ar_request.approved_date is not None

    def test_transition_to_rejected(self):
        ar_request = ARRequest(product=1, shop=1)

        ar_request.transition_to_rejected()

        assert ar_request.status == ARRequestStatus.REJECTED
        assert ar_request.rejected_date is not None

    def test_approved_is_terminal(self):
        ar_request = ARRequest(product=1, shop=1, status=ARRequestStatus.APPROVED)

        assert ar_request.can_transition_to(ARRequestStatus.PENDING) is False
        assert ar_request.can_transition_to(ARRequestStatus.REJECTED) is False
        with pytest.raises(ValueError, match="Cannot transition to rejected"):
            ar_request.transition_to_rejected()

    def test_rejected_is_terminal(self):
        ar_request = ARRequest(product=1, shop=1, status=ARRequestStatus.REJECTED)

        with pytest.raises(ValueError, match="Cannot transition to approved"):
            ar_request.transition_to_approved()

    def test_cannot_move_back_to_pending(self):
        ar_request = ARRequest(product=1, shop=1, status=ARRequestStatus.APPROVED)

        with pytest.raises(ValueError, match="Cannot transition to Pending"):
            ar_request.transition_to(ARRequestStatus.PENDING)

    def test_pending_to_pending_is_not_a_transition(self):
        ar_request = ARRequest(product=1, shop=1)

        assert ar_request.can_transition_to(ARRequestStatus.PENDING) is False
        with pytest.raises(ValueError):
            ar_request.transition_to(ARRequestStatus.PENDING)


class TestARRequestCatalog:
    """AR requests through the catalog service"""

    async def test_create_and_approve(self, catalog, company, make_product):
        product = await make_product(company)

        ar_request = await catalog.create_ar_request(product.id, company.id)
        assert ar_request.status == ARRequestStatus.PENDING

        updated = await catalog.update_ar_request(ar_request.id, ARRequestStatus.APPROVED)
        assert updated.status == ARRequestStatus.APPROVED
        assert updated.approved_date is not None

    async def test_invalid_transition_raises(self, catalog, company, make_product):
        product = await make_product(company)
        ar_request = await catalog.create_ar_request(product.id, company.id)
        await catalog.update_ar_request(ar_request.id, ARRequestStatus.REJECTED)

        with pytest.raises(InvalidTransitionError):
            await catalog.update_ar_request(ar_request.id, ARRequestStatus.APPROVED)

    async def test_unknown_request_is_none(self, catalog):
        assert await catalog.update_ar_request(999, ARRequestStatus.APPROVED) is None

    async def test_product_must_belong_to_shop(self, catalog, company, other_company, make_product):
        product = await make_product(company)

        assert await catalog.create_ar_request(product.id, other_company.id) is None

    async def test_list_newest_first_and_scoped(self, catalog, company, other_company, make_product):
        product = await make_product(company)
        other_product = await make_product(other_company, name="Leather Jacket")
        first = await catalog.create_ar_request(product.id, company.id)
        second = await catalog.create_ar_request(product.id, company.id)
        await catalog.create_ar_request(other_product.id, other_company.id)

        requests = await catalog.get_ar_requests(shop_id=company.id)

        assert [r.id for r in requests] == [second.id, first.id]
        assert len(await catalog.get_ar_requests()) == 3
