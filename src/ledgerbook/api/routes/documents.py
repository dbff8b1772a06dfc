"""Purchase order, sales invoice, expense and tax record routes."""

from fastapi import APIRouter, Depends

from ledgerbook.api.dependencies import get_document_service, get_tax_service
from ledgerbook.api.schemas import (
    CreatedResponse,
    ExpenseCreate,
    ExpenseResponse,
    MessageResponse,
    PurchaseOrderCreate,
    PurchaseOrderResponse,
    SalesInvoiceCreate,
    SalesInvoiceResponse,
    StatusUpdate,
    TaxRecordCreate,
    TaxRecordResponse,
)
from ledgerbook.domain.documents import DocumentService
from ledgerbook.domain.tax import TaxService

router = APIRouter(tags=["documents"])


@router.get("/purchase-orders", response_model=list[PurchaseOrderResponse])
def list_purchase_orders(service: DocumentService = Depends(get_document_service)):
    return [PurchaseOrderResponse.model_validate(o) for o in service.list_purchase_orders()]


@router.post("/purchase-orders", response_model=CreatedResponse)
def create_purchase_order(
    body: PurchaseOrderCreate, service: DocumentService = Depends(get_document_service)
):
    order = service.create_purchase_order(
        order_no=body.order_no,
        date=body.date,
        supplier=body.supplier,
        amount=body.amount,
        items=body.items,
        order_id=body.id,
    )
    return CreatedResponse(id=order.id, message="Purchase order created")


@router.put("/purchase-orders/{order_id}", response_model=MessageResponse)
def update_purchase_order(
    order_id: str, body: StatusUpdate, service: DocumentService = Depends(get_document_service)
):
    service.update_status("purchase_order", order_id, body.status)
    return MessageResponse(message="Purchase order status updated")


@router.get("/sales-invoices", response_model=list[SalesInvoiceResponse])
def list_sales_invoices(service: DocumentService = Depends(get_document_service)):
    return [SalesInvoiceResponse.model_validate(i) for i in service.list_sales_invoices()]


@router.post("/sales-invoices", response_model=CreatedResponse)
def create_sales_invoice(
    body: SalesInvoiceCreate, service: DocumentService = Depends(get_document_service)
):
    invoice = service.create_sales_invoice(
        invoice_no=body.invoice_no,
        date=body.date,
        customer=body.customer,
        amount=body.amount,
        items=body.items,
        invoice_id=body.id,
    )
    return CreatedResponse(id=invoice.id, message="Sales invoice created")


@router.put("/sales-invoices/{invoice_id}", response_model=MessageResponse)
def update_sales_invoice(
    invoice_id: str, body: StatusUpdate, service: DocumentService = Depends(get_document_service)
):
    service.update_status("sales_invoice", invoice_id, body.status)
    return MessageResponse(message="Sales invoice status updated")


@router.get("/expenses", response_model=list[ExpenseResponse])
def list_expenses(service: DocumentService = Depends(get_document_service)):
    return [ExpenseResponse.model_validate(e) for e in service.list_expenses()]


@router.post("/expenses", response_model=CreatedResponse)
def create_expense(body: ExpenseCreate, service: DocumentService = Depends(get_document_service)):
    expense = service.create_expense(
        date=body.date,
        employee=body.employee,
        amount=body.amount,
        category=body.category,
        description=body.description,
        expense_id=body.id,
    )
    return CreatedResponse(id=expense.id, message="Expense created")


@router.put("/expenses/{expense_id}", response_model=MessageResponse)
def update_expense(
    expense_id: str, body: StatusUpdate, service: DocumentService = Depends(get_document_service)
):
    service.update_status("expense", expense_id, body.status)
    return MessageResponse(message="Expense status updated")


@router.get("/tax-records", response_model=list[TaxRecordResponse])
def list_tax_records(service: TaxService = Depends(get_tax_service)):
    return [TaxRecordResponse.model_validate(r) for r in service.list_tax_records()]


@router.post("/tax-records", response_model=CreatedResponse)
def create_tax_record(body: TaxRecordCreate, service: TaxService = Depends(get_tax_service)):
    record = service.create_tax_record(
        period=body.period,
        type=body.type,
        taxable_amount=body.taxable_amount,
        tax_rate=body.tax_rate,
        record_id=body.id,
    )
    return CreatedResponse(id=record.id, message="Tax record created")


@router.put("/tax-records/{record_id}", response_model=MessageResponse)
def update_tax_record(
    record_id: str, body: StatusUpdate, service: TaxService = Depends(get_tax_service)
):
    service.update_status(record_id, body.status)
    return MessageResponse(message="Tax record status updated")
