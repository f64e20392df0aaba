"""Customer summaries and detail views built from purchases and payments."""

from datetime import date
from decimal import Decimal
from typing import List

from paytrack.app.models.customer import Customer
from paytrack.app.schemas.customer import CustomerDetail, CustomerRead, CustomerSummary
from paytrack.app.schemas.payment import PaymentRead
from paytrack.app.schemas.purchase import PurchaseRead, PurchaseWithPayments
from paytrack.app.services.money import ZERO, quantize_money
from paytrack.app.services.payment_status import OVERDUE, PAID, UPCOMING, effective_status


def build_customer_summary(customer: Customer, today: date) -> CustomerSummary:
    total_paid = ZERO
    total_overdue = ZERO
    next_payment = None

    for purchase in customer.purchases:
        for payment in purchase.payments:
            status = effective_status(payment, today)
            amount = Decimal(str(payment.amount or 0))
            if status == PAID:
                total_paid += amount
            elif status == OVERDUE:
                total_overdue += amount
            elif status == UPCOMING and (next_payment is None or payment.due_date < next_payment.due_date):
                next_payment = payment

    base = CustomerRead.model_validate(customer)
    return CustomerSummary(
        **base.model_dump(),
        next_payment_date=next_payment.due_date if next_payment else None,
        next_payment_amount=quantize_money(next_payment.amount) if next_payment else None,
        total_overdue=quantize_money(total_overdue),
        total_paid=quantize_money(total_paid),
    )


def build_customer_summaries(customers: List[Customer], today: date) -> List[CustomerSummary]:
    return [build_customer_summary(customer, today) for customer in customers]


def build_purchase_with_payments(purchase, today: date) -> PurchaseWithPayments:
    base = PurchaseRead.model_validate(purchase)
    return PurchaseWithPayments(
        **base.model_dump(),
        payments=[PaymentRead.from_payment(payment, today) for payment in purchase.payments],
    )


def build_customer_detail(customer: Customer, today: date) -> CustomerDetail:
    base = CustomerRead.model_validate(customer)
    return CustomerDetail(
        **base.model_dump(),
        purchases=[build_purchase_with_payments(purchase, today) for purchase in customer.purchases],
    )
