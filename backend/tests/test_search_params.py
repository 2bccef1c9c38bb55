"""
Testes da normalização dos parâmetros de busca.

Executar com: pytest backend/tests/test_search_params.py -v
"""

import pytest

from imoveis.services.search_params import (
    SearchConfig,
    SearchParams,
    normalize_property_type,
    normalize_search_params,
)


@pytest.fixture
def config() -> SearchConfig:
    return SearchConfig()


# =============================================================================
# PAGINAÇÃO
# =============================================================================

def test_defaults_when_nothing_informed(config):
    normalized = normalize_search_params(SearchParams(), config)

    assert normalized.page == 1
    assert normalized.limit == 20
    assert normalized.sort_by == "createdAt"
    assert normalized.sort_order == "desc"
    assert normalized.skip == 0


@pytest.mark.parametrize("page", [0, -1, -50])
def test_page_below_one_is_clamped(config, page):
    normalized = normalize_search_params(SearchParams(page=page), config)
    assert normalized.page == 1


@pytest.mark.parametrize("limit, expected", [(500, 100), (101, 100), (0, 1), (-7, 1), (1, 1), (100, 100), (35, 35)])
def test_limit_is_clamped_into_range(config, limit, expected):
    normalized = normalize_search_params(SearchParams(limit=limit), config)
    assert normalized.limit == expected


def test_skip_uses_page_and_limit(config):
    normalized = normalize_search_params(SearchParams(page=3, limit=10), config)
    assert normalized.skip == 20


def test_page_size_comes_from_config():
    config = SearchConfig(default_page_size=12, max_page_size=30)

    assert normalize_search_params(SearchParams(), config).limit == 12
    assert normalize_search_params(SearchParams(limit=99), config).limit == 30


def test_unknown_sort_falls_back_to_default(config):
    normalized = normalize_search_params(SearchParams(sort_by="title", sort_order="random"), config)

    assert normalized.sort_by == "createdAt"
    assert normalized.sort_order == "desc"


def test_sort_is_kept_when_valid(config):
    normalized = normalize_search_params(SearchParams(sort_by="price", sort_order="asc"), config)

    assert normalized.sort_by == "price"
    assert normalized.sort_order == "asc"


# =============================================================================
# TIPO DE IMÓVEL
# =============================================================================

@pytest.mark.parametrize("token, expected", [
    ("casa", "HOUSE"),
    ("CASA", "HOUSE"),
    ("Casa", "HOUSE"),
    ("apartamento", "APARTMENT"),
    ("terreno", "LAND"),
    ("comercial", "COMMERCIAL"),
    ("condominio", "CONDO"),
    ("condomínio", "CONDO"),
    ("house", "HOUSE"),
])
def test_known_types_are_mapped(token, expected):
    assert normalize_property_type(token) == expected


def test_unknown_type_passes_through_uppercased():
    assert normalize_property_type("castelo") == "CASTELO"
    assert normalize_property_type("Sala Comercial") == "SALA COMERCIAL"


def test_custom_synonym_table():
    config = SearchConfig(type_synonyms={"SOBRADO": "HOUSE"})
    normalized = normalize_search_params(SearchParams(type="sobrado"), config)

    assert normalized.predicate.property_type == "HOUSE"


# =============================================================================
# PREDICADO
# =============================================================================

def test_status_defaults_to_available(config):
    assert normalize_search_params(SearchParams(), config).predicate.status == "AVAILABLE"


def test_explicit_status_overrides_default(config):
    assert normalize_search_params(SearchParams(status="SOLD"), config).predicate.status == "SOLD"


@pytest.mark.parametrize("value", [0, -1, -100000.0])
def test_non_positive_prices_are_ignored(config, value):
    predicate = normalize_search_params(SearchParams(price_min=value, price_max=value), config).predicate

    assert predicate.price_min is None
    assert predicate.price_max is None


def test_positive_prices_are_kept(config):
    predicate = normalize_search_params(SearchParams(price_min=100000, price_max=500000), config).predicate

    assert predicate.price_min == 100000
    assert predicate.price_max == 500000


def test_zero_is_a_valid_lower_bound_for_counts(config):
    predicate = normalize_search_params(SearchParams(bedrooms_min=0, parking_spaces_min=0), config).predicate

    assert predicate.bedrooms_min == 0
    assert predicate.parking_spaces_min == 0


def test_inverted_ranges_are_not_rejected(config):
    predicate = normalize_search_params(SearchParams(bedrooms_min=5, bedrooms_max=2), config).predicate

    assert predicate.bedrooms_min == 5
    assert predicate.bedrooms_max == 2


def test_blank_city_is_ignored(config):
    predicate = normalize_search_params(SearchParams(city="   ", state=""), config).predicate

    assert predicate.city is None
    assert predicate.state is None


def test_amenities_are_cleaned(config):
    params = SearchParams(amenities=["Piscina", " Churrasqueira ", "", "Piscina"])
    predicate = normalize_search_params(params, config).predicate

    assert predicate.amenities == ("Piscina", "Churrasqueira")


def test_echo_lists_only_applied_filters(config):
    params = SearchParams(type="casa", city="Goiânia", price_max=500000, price_min=0, amenities=["Piscina"])
    normalized = normalize_search_params(params, config)

    assert normalized.echo() == {
        "status": "AVAILABLE",
        "property_type": "HOUSE",
        "price_max": 500000,
        "city": "Goiânia",
        "amenities": ["Piscina"],
        "sort_by": "createdAt",
        "sort_order": "desc",
    }


@pytest.mark.parametrize("overrides", [
    {"max_page_size": 1000},
    {"max_page_size": 0},
    {"default_page_size": 50, "max_page_size": 30},
])
def test_config_rejects_page_sizes_outside_cap(overrides):
    with pytest.raises(ValueError):
        SearchConfig(**overrides)
