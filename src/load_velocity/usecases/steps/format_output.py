from __future__ import annotations

import json

from load_velocity.domain.errors import EncodeError
from load_velocity.domain.messages import Decision
from load_velocity.usecases.messages import OutputLine


class FormatOutput:
    # Formats a Decision as compact JSON with the fixed key order id, customer_id, accepted.
    def __call__(self, msg: Decision) -> list[OutputLine]:
        payload = {"id": msg.id, "customer_id": msg.customer_id, "accepted": msg.accepted}
        try:
            json_text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
            # Lone surrogates cannot be written as UTF-8.
            json_text.encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise EncodeError(f"cannot encode decision: {exc}", line_no=msg.line_no) from exc
        return [OutputLine(line_no=msg.line_no, json_text=json_text, decision=msg)]
