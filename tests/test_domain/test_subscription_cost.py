"""Tests for subscription cost aggregation (in-memory, no DB)"""
import uuid

from app.domain.subscription_cost import (
    ReportWindow, Subscription, SubscriptionFilter, subscription_cost, total_cost,
)
from app.domain.year_month import YearMonth

USER_A = uuid.UUID("60601fee-2bf1-4721-ae6f-7636e79a0cba")
USER_B = uuid.UUID("0b7e4c7a-5c1d-4d0e-9d7a-2f3a4b5c6d7e")

WINDOW = ReportWindow(YearMonth(2024, 1), YearMonth(2024, 4))


def _sub(price, start, end=None, user_id=USER_A, service_name="Yandex Plus"):
    return Subscription(
        price=price,
        start_month=start,
        end_month=end,
        user_id=user_id,
        service_name=service_name,
    )


class TestTotalCost:
    def test_reference_scenario(self):
        # S1: янв-апр в окне (4 * 100), S2: мар-апр (2 * 50)
        s1 = _sub(100, YearMonth(2024, 1), YearMonth(2024, 6))
        s2 = _sub(50, YearMonth(2024, 3))
        assert subscription_cost(s1, WINDOW) == 400
        assert subscription_cost(s2, WINDOW) == 100
        assert total_cost([s1, s2], WINDOW) == 500

    def test_empty_is_zero(self):
        assert total_cost([], WINDOW) == 0

    def test_no_overlap_contributes_zero(self):
        before = _sub(100, YearMonth(2023, 1), YearMonth(2023, 12))
        after = _sub(100, YearMonth(2024, 5), YearMonth(2024, 12))
        assert subscription_cost(before, WINDOW) == 0
        assert subscription_cost(after, WINDOW) == 0
        assert total_cost([before, after], WINDOW) == 0

    def test_inverted_subscription_contributes_zero(self):
        inverted = _sub(100, YearMonth(2024, 4), YearMonth(2024, 2))
        assert total_cost([inverted], WINDOW) == 0

    def test_zero_price(self):
        assert total_cost([_sub(0, YearMonth(2024, 1))], WINDOW) == 0

    def test_order_independent_and_repeatable(self):
        subs = [
            _sub(100, YearMonth(2024, 1), YearMonth(2024, 6)),
            _sub(50, YearMonth(2024, 3)),
            _sub(30, YearMonth(2023, 6), YearMonth(2024, 2)),
        ]
        first = total_cost(subs, WINDOW)
        assert first == 400 + 100 + 60
        assert total_cost(list(reversed(subs)), WINDOW) == first
        assert total_cost(subs, WINDOW) == first

    def test_accepts_generator(self):
        subs = (_sub(10, YearMonth(2024, 1)) for _ in range(3))
        assert total_cost(subs, WINDOW) == 120


class TestSubscriptionFilter:
    def test_filter_by_user(self):
        subs = [
            _sub(100, YearMonth(2024, 1), user_id=USER_A),
            _sub(1000, YearMonth(2024, 1), user_id=USER_B),
        ]
        assert total_cost(subs, WINDOW, SubscriptionFilter(user_id=USER_A)) == 400

    def test_filter_by_service_name(self):
        subs = [
            _sub(100, YearMonth(2024, 1), service_name="Netflix"),
            _sub(10, YearMonth(2024, 1), service_name="Spotify"),
        ]
        assert total_cost(subs, WINDOW, SubscriptionFilter(service_name="Spotify")) == 40

    def test_filters_combine_with_and(self):
        subs = [
            _sub(1, YearMonth(2024, 1), user_id=USER_A, service_name="Netflix"),
            _sub(10, YearMonth(2024, 1), user_id=USER_A, service_name="Spotify"),
            _sub(100, YearMonth(2024, 1), user_id=USER_B, service_name="Netflix"),
        ]
        f = SubscriptionFilter(user_id=USER_A, service_name="Netflix")
        assert total_cost(subs, WINDOW, f) == 4

    def test_empty_filter_matches_everything(self):
        assert SubscriptionFilter().matches(_sub(1, YearMonth(2024, 1)))

    def test_all_filtered_out_is_zero(self):
        subs = [_sub(100, YearMonth(2024, 1), user_id=USER_A)]
        assert total_cost(subs, WINDOW, SubscriptionFilter(user_id=USER_B)) == 0
