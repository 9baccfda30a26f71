from objkit.selector.builder import CssSelectorBuilder
from objkit.selector.facade import SelectorBuilderFacade, css_selector_builder
from objkit.selector.model import SelectorPart, SelectorState

__all__ = [
    "CssSelectorBuilder",
    "SelectorBuilderFacade",
    "SelectorPart",
    "SelectorState",
    "css_selector_builder",
]
