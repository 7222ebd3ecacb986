"""
Mail Model Service
Entry point for template code that still passes named parameters:
validates the mapping into the typed input of the right generator and
returns the flat template mapping

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import ValidationError

from order_mail.core.exceptions import InvalidArgument
from order_mail.domain.mail import CustomerFeedbackSentInput, OrderSentInput
from order_mail.services.customer_feedback_service import CustomerFeedbackService
from order_mail.services.order_sent_service import OrderSentService

logger = logging.getLogger(__name__)

ORDER_SENT = "order_sent"
CUSTOMER_FEEDBACK_SENT = "customer_feedback_sent"


def _order_sent(parameters: Mapping[str, Any], log: logging.Logger) -> Dict[str, Any]:
    if parameters.get("order") is None or parameters.get("tradeItems") is None:
        raise InvalidArgument("Parameters are missing.")

    data = OrderSentInput.model_validate({
        "order": parameters["order"],
        "trade_items": parameters["tradeItems"],
    })
    return OrderSentService(logger=log).generate(data).to_model_map()


def _customer_feedback_sent(parameters: Mapping[str, Any], log: logging.Logger) -> Dict[str, Any]:
    if parameters.get("customerFeedback") is None:
        raise InvalidArgument("customerFeedback is missing")

    data = CustomerFeedbackSentInput.model_validate({
        "customer_feedback": parameters["customerFeedback"],
    })
    return CustomerFeedbackService(logger=log).generate(data).to_model_map()


GENERATORS: Dict[str, Callable[[Mapping[str, Any], logging.Logger], Dict[str, Any]]] = {
    ORDER_SENT: _order_sent,
    CUSTOMER_FEEDBACK_SENT: _customer_feedback_sent,
}


def generate_model(template_name: str, parameters: Optional[Mapping[str, Any]],
                   log: Optional[logging.Logger] = None) -> Dict[str, Any]:
    """
    Generate the template mapping for a mail

    Args:
        template_name: "order_sent" or "customer_feedback_sent"
        parameters: Named inputs ("order"/"tradeItems" or "customerFeedback")
        log: Logger handed to the generator (module logger by default)

    Returns:
        Flat mapping of template keys to models

    Raises:
        InvalidArgument: unknown template, missing or malformed parameters
    """
    generator = GENERATORS.get(template_name)
    if generator is None:
        raise InvalidArgument(f"Unknown mail template: {template_name}")

    if not isinstance(parameters, Mapping):
        raise InvalidArgument("Parameters are missing.")

    try:
        return generator(parameters, log or logger)
    except ValidationError as e:
        raise InvalidArgument(f"Invalid parameters for {template_name}: {e}") from e
