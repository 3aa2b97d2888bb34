from collections import OrderedDict
from typing import Optional
from uuid import uuid4

from campus_profiles.config import settings
from campus_profiles.modules.auth.flow import AuthFlow
from campus_profiles.modules.auth.schemas import AuthMode


class FormRegistry:
    """Open login/signup form instances by form id, oldest evicted first."""

    def __init__(self, max_size: int):
        self.max_size = max_size
        self._flows: "OrderedDict[str, AuthFlow]" = OrderedDict()

    def open(self, flow: AuthFlow) -> str:
        form_id = uuid4().hex
        self._flows[form_id] = flow
        self._evict(keep=form_id)
        return form_id

    def _evict(self, keep: str) -> None:
        # A pending flow stays reachable until its submission finishes
        for form_id in list(self._flows):
            if len(self._flows) <= self.max_size:
                break
            if form_id != keep and not self._flows[form_id].busy:
                del self._flows[form_id]

    def get(self, form_id: str, mode: AuthMode) -> Optional[AuthFlow]:
        flow = self._flows.get(form_id)
        if flow is None or flow.mode != mode:
            return None
        return flow

    def discard(self, form_id: str) -> None:
        self._flows.pop(form_id, None)

    def __len__(self) -> int:
        return len(self._flows)


form_registry = FormRegistry(settings.max_open_forms)
