import pytest

from dojoforge.contract_selector import ContractSelector, to_snake_case


def test_package():
    assert ContractSelector("my_package::my_contract").package() == "my_package"
    assert ContractSelector("my_package").package() == "my_package"


def test_path_with_model_snake_case():
    assert (
        ContractSelector("my_package::MyContract").path_with_model_snake_case()
        == "my_package::my_contract"
    )
    assert (
        ContractSelector(
            "my_package::sub_package::MyContract"
        ).path_with_model_snake_case()
        == "my_package::sub_package::my_contract"
    )
    assert (
        ContractSelector("my_package::erc20::Token").path_with_model_snake_case()
        == "my_package::erc20::token"
    )


def test_path_with_model_snake_case_without_separator():
    assert ContractSelector("MyModel").path_with_model_snake_case() == "::my_model"


def test_full_path():
    selector = ContractSelector("my_package::sub_package::MyContract")
    assert selector.full_path() == "my_package::sub_package::MyContract"


def test_validate():
    ContractSelector("my_package::sub_package::MyContract").validate()
    with pytest.raises(ValueError, match="multiple wildcard"):
        ContractSelector("my_package::*::*::MyContract").validate()


def test_matches_wildcard():
    selector = ContractSelector("my_package::*")
    assert selector.matches("my_package::sub_package::MyContract")
    assert selector.matches("my_package::other_package::MyContract")
    assert not selector.matches("other_package::sub_package::MyContract")
    assert not selector.matches("package::sub_package::OtherContract")


def test_matches_exact():
    selector = ContractSelector("my_package::models::Position")
    assert selector.matches("my_package::models::position")
    assert not selector.matches("my_package::models::Position")


def test_wildcard_and_partial_path():
    selector = ContractSelector("pkg::mod::*")
    assert selector.is_wildcard() is True
    assert selector.partial_path() == "pkg::mod::"
    plain = ContractSelector("pkg::mod")
    assert plain.is_wildcard() is False
    assert plain.partial_path() == "pkg::mod"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("MyContract", "my_contract"),
        ("erc20", "erc_20"),
        ("Token", "token"),
        ("HTMLParser", "html_parser"),
        ("already_snake", "already_snake"),
        ("kebab-case name", "kebab_case_name"),
    ],
)
def test_to_snake_case(text, expected):
    assert to_snake_case(text) == expected