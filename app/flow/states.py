"""
app/flow/states.py

Purpose: Defines the conversation state of a user

- Step enum (coarse conversation stage)
- Company enum (which company menu is being browsed)
- UserState record kept per sender in the state store
"""

from enum import Enum
from typing import Any, Dict, Optional
from dataclasses import dataclass, replace


class Step(str, Enum):
    """
    Coarse conversation stage of a user.
    """
    START = "start"
    WELCOME = "welcome"
    SOFTWARE = "software"
    DIGITAL = "digital"


class Company(str, Enum):
    """
    NovoNex companies, each with its own paginated service menu.
    """
    SOFTWARE = "software"
    DIGITAL = "digital"


# Step entered when a company menu is opened
COMPANY_STEPS: Dict[Company, Step] = {
    Company.SOFTWARE: Step.SOFTWARE,
    Company.DIGITAL: Step.DIGITAL,
}


@dataclass(frozen=True)
class UserState:
    """
    Navigation state of a single user.

    Attributes:
        step: Current conversation stage
        page: Current page of the company menu (1-based)
        company: Company whose menu is open, if any
    """
    step: Step = Step.START
    page: int = 1
    company: Optional[Company] = None

    def __post_init__(self):
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")

    @classmethod
    def initial(cls) -> "UserState":
        """State of a user who has never written before."""
        return cls()

    @classmethod
    def welcome(cls) -> "UserState":
        """State after the welcome menu has been shown."""
        return cls(step=Step.WELCOME, page=1, company=None)

    @classmethod
    def browsing(cls, company: Company, page: int = 1) -> "UserState":
        """State while browsing a company's service menu."""
        return cls(step=COMPANY_STEPS[company], page=page, company=company)

    def with_page(self, page: int) -> "UserState":
        return replace(self, page=page)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step": self.step.value,
            "page": self.page,
            "company": self.company.value if self.company else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserState":
        company = data.get("company")
        return cls(
            step=Step(data.get("step", Step.START.value)),
            page=int(data.get("page", 1)),
            company=Company(company) if company else None,
        )


@dataclass(frozen=True)
class DispatchResult:
    """
    Outcome of routing one inbound text.

    Attributes:
        state: State to store for the user
        reply: Outbound payload, or None when nothing should be sent
    """
    state: UserState
    reply: Optional[Dict[str, Any]] = None
