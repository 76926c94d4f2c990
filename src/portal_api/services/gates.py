# This project was developed with assistance from AI tools.
"""Section gates: the "do you have any ...?" flags on the application form.

A gated section is built only when its flag is an explicit yes. No, blank and
unreadable answers all skip the section, which is a normal outcome rather
than an error.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .normalize import TriState, to_tri_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionGate:
    name: str
    flag_field: str

    def state(self, form: Mapping[str, object]) -> TriState:
        return to_tri_state(form.get(self.flag_field))

    def is_open(self, form: Mapping[str, object]) -> bool:
        state = self.state(form)
        if state is not TriState.TRUE:
            logger.debug("Section %s skipped (%s=%s)", self.name, self.flag_field, state.value)
            return False
        return True


FORMER_ADDRESS = SectionGate("former address", "hasFormerAddress")
MAILING_ADDRESS = SectionGate("mailing address", "hasMailingAddress")

CURRENT_EMPLOYMENT = SectionGate("current employment", "hasCurrentEmployment")
ADDITIONAL_EMPLOYMENT = SectionGate("additional employment", "hasAdditionalEmployment")
PREVIOUS_EMPLOYMENT = SectionGate("previous employment", "hasPreviousEmploymentAdditional2")

OTHER_INCOME = SectionGate("other income", "hasOtherIncome")
OTHER_ASSETS = SectionGate("other assets and credits", "hasOtherAssets2b")
LIABILITIES = SectionGate("liabilities", "hasLiabilities2c")
OTHER_LIABILITIES = SectionGate("other liabilities and expenses", "hasOtherLiabilities2d")

REAL_ESTATE = SectionGate("real estate owned", "hasRealEstate3")
# Property #1 is covered by REAL_ESTATE itself.
ADDITIONAL_PROPERTIES = {
    2: SectionGate("real estate owned #2", "hasProperty2"),
    3: SectionGate("real estate owned #3", "hasProperty3"),
}
PROPERTY_MORTGAGES = {
    n: SectionGate(f"mortgage on property #{n}", f"hasMortgageLoans{n}") for n in (1, 2, 3)
}

NEW_MORTGAGES = SectionGate("new mortgages on subject property", "hasNewMortgages4b")
RENTAL_INCOME = SectionGate("subject property rental income", "hasRentalIncome4c")
GIFTS_GRANTS = SectionGate("gifts and grants", "hasGiftsGrants4d")
