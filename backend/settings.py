import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_SHEET_ID = "1aXx2vuHjQ3uAfvt1zy9CzviygKBbenKHIp_d76GkhTA"
DEFAULT_SHEET_NAME = "BANK MIS"


class ColumnCatalog(BaseModel):
    """Expected header text for every logical column in the BANK MIS tab.

    Header text in the sheet drifts over time; the values here are the
    nominal names and are used as fallbacks when fuzzy resolution finds
    nothing better.
    """
    cluster: str = "Cluster"
    sl_no: str = "Sl No."
    booking_date: str = "Booking Date"
    unit_no: str = "Unit No."
    sold_status: str = "SOLD/UNSO"
    model: str = "Model"
    unit_type: str = "Unit Type"
    sba: str = "SBA"
    terrace_area: str = "Terrace Area"
    source: str = "Source"
    tally_customer_name: str = "Tally Customer Name"
    customer_name: str = "Customer name"
    mobile: str = "Mobile Number"
    email: str = "Email Id"
    sale_price: str = "Sale Price"
    construction_agreement: str = "Construction Agreement"
    sale_agreement: str = "Sale Agreement"
    gross_sale_value_no_gst: str = "Gross Sale Value without GST"
    gst_percent: str = "GST %"
    interiors: str = "Interiors"
    car_parking: str = "Car Parking"
    down_payment: str = "Down Payment/ Agreement"
    scheme: str = "Scheme"
    cashback_8: str = "Cashback @ 8%"
    sa_gross_dl1: str = "Sale Agreement Gross ( Demand Letter 1)"
    date_of_agreement: str = "Date of Agreement"
    pre_booking: str = "Pre Booking"
    payment1: str = "Booking Received ( Payment 1 )"
    payment2: str = "Payment 2"
    payment3: str = "Payment 3"
    ref_of_demand: str = "Ref of Demand"
    date_of_demand: str = "Date of Demand"
    amount: str = "Amount"
    date_of_receipt: str = "Date of Receipt"
    bank_account_name: str = "Bank Account Name"
    tx_ref_no: str = "Transaction reference Number"
    payment5: str = "Payment 5"
    payment6: str = "Payment 6"
    payment7: str = "Payment 7"
    payment8: str = "Payment 8"
    payment9: str = "Payment 9"
    payment10: str = "Payment 10"
    payment11: str = "Payment 11"
    payment12: str = "Payment 12"
    payment13: str = "Payment 13"
    payment14: str = "Payment 14"
    payment15: str = "Payment 15"
    gross_amount_received: str = "Gross Amount Received"
    sale_agreement_status: str = "Sale Agreement Status"
    demand_percent: str = "Demand as on Date (%)"
    demand_value: str = "Demand as on Date (Value)"
    pending_demand: str = "Pending Demand"
    receivables: str = "Receivables"
    home_loan_financed_by: str = "Home Loan Financed by"
    loan_status: str = "Loan Status"


@dataclass(frozen=True)
class Settings:
    port: int = 8080
    sheet_id: str = DEFAULT_SHEET_ID
    sheet_name: str = DEFAULT_SHEET_NAME
    header_row: int = 2
    last_column: str = "AZ"
    service_key: Optional[str] = None
    credentials_file: str = "credentials.json"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    environment: str = "development"
    log_level: str = "INFO"

    @property
    def sheet_range(self) -> str:
        """A1 range covering the header row and every data row below it"""
        return f"'{self.sheet_name}'!A{self.header_row}:{self.last_column}"


def load_settings() -> Settings:
    """Build settings from the environment (.env is loaded on import)"""
    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    return Settings(
        port=int(os.getenv("PORT", 8080)),
        sheet_id=os.getenv("SHEET_ID") or DEFAULT_SHEET_ID,
        sheet_name=os.getenv("SHEET_NAME") or DEFAULT_SHEET_NAME,
        header_row=int(os.getenv("HEADER_ROW", 2)),
        last_column=os.getenv("SHEET_LAST_COLUMN", "AZ"),
        service_key=os.getenv("GOOGLE_SERVICE_KEY") or None,
        credentials_file=os.getenv("GOOGLE_CREDENTIALS_FILE", "credentials.json"),
        cors_origins=origins or ["*"],
        environment=os.getenv("ENVIRONMENT", "development"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


settings = load_settings()
columns = ColumnCatalog()
