from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from aasidgen.factory import create_id_provider
from aasidgen.options import IdScheme

names = st.text(max_size=24)
schemes = st.sampled_from([IdScheme.EXAMPLE_IRI, IdScheme.UUID_URN])


@given(scheme=schemes, shell=names, submodel=names)
def test_repeated_calls_are_idempotent(scheme: IdScheme, shell: str, submodel: str) -> None:
    provider = create_id_provider(scheme=scheme)
    for derive in (
        lambda: provider.get_asset_id(shell),
        lambda: provider.get_shell_id(shell),
        lambda: provider.get_submodel_id(shell, submodel),
        lambda: provider.get_concept_description_id(submodel),
    ):
        assert derive() == derive()


@given(scheme=schemes, shells=st.lists(names, min_size=1, max_size=20, unique=True))
def test_distinct_seeds_never_share_an_identifier(scheme: IdScheme, shells: list[str]) -> None:
    provider = create_id_provider(scheme=scheme)
    issued: list[str] = []
    for shell in shells:
        issued.append(provider.get_shell_id(shell))
        issued.append(provider.get_asset_id(shell))
        issued.append(provider.get_concept_description_id(shell))
        issued.append(provider.get_submodel_id(shell, "Nameplate"))
    assert len(issued) == len(set(issued))
    assert provider.issued_count == len(issued)


@given(shells=st.lists(names, max_size=15))
def test_hash_mode_sequences_match_across_instances(shells: list[str]) -> None:
    first = create_id_provider(base_iri="https://example.com/ids/")
    second = create_id_provider(base_iri="https://example.com/ids/")
    assert [first.get_asset_id(s) for s in shells] == [second.get_asset_id(s) for s in shells]
    assert [first.get_shell_id(s) for s in shells] == [second.get_shell_id(s) for s in shells]


@given(shells=st.lists(names, max_size=15))
def test_uuid_sequences_match_across_instances(shells: list[str]) -> None:
    first = create_id_provider(scheme="uuid_urn")
    second = create_id_provider(scheme="uuid_urn")
    assert [first.get_submodel_id(s, "TechnicalData") for s in shells] == [
        second.get_submodel_id(s, "TechnicalData") for s in shells
    ]
