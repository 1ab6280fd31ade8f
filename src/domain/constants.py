"""Domain constants for the chart of accounts."""

NON_CURRENT_ASSET = "NON_CURRENT_ASSET"
CONTRA_ASSET = "CONTRA_ASSET"
INVENTORY = "INVENTORY"
BANK = "BANK"
CURRENT_ASSET = "CURRENT_ASSET"
RECEIVABLE = "RECEIVABLE"
NON_CURRENT_LIABILITY = "NON_CURRENT_LIABILITY"
CONTROL = "CONTROL"
CURRENT_LIABILITY = "CURRENT_LIABILITY"
PAYABLE = "PAYABLE"
EQUITY = "EQUITY"
OPERATING_REVENUE = "OPERATING_REVENUE"
OPERATING_EXPENSE = "OPERATING_EXPENSE"
NON_OPERATING_REVENUE = "NON_OPERATING_REVENUE"
DIRECT_EXPENSE = "DIRECT_EXPENSE"
OVERHEAD_EXPENSE = "OVERHEAD_EXPENSE"
OTHER_EXPENSE = "OTHER_EXPENSE"
RECONCILIATION = "RECONCILIATION"

ACCOUNT_TYPES = (
    NON_CURRENT_ASSET,
    CONTRA_ASSET,
    INVENTORY,
    BANK,
    CURRENT_ASSET,
    RECEIVABLE,
    NON_CURRENT_LIABILITY,
    CONTROL,
    CURRENT_LIABILITY,
    PAYABLE,
    EQUITY,
    OPERATING_REVENUE,
    OPERATING_EXPENSE,
    NON_OPERATING_REVENUE,
    DIRECT_EXPENSE,
    OVERHEAD_EXPENSE,
    OTHER_EXPENSE,
    RECONCILIATION,
)

PURCHASABLE_TYPES = (
    OPERATING_EXPENSE,
    DIRECT_EXPENSE,
    OVERHEAD_EXPENSE,
    OTHER_EXPENSE,
    NON_CURRENT_ASSET,
    CURRENT_ASSET,
    INVENTORY,
)

ACCOUNT_TYPE_LABELS = {
    NON_CURRENT_ASSET: "Non Current Asset",
    CONTRA_ASSET: "Contra Asset",
    INVENTORY: "Inventory",
    BANK: "Bank",
    CURRENT_ASSET: "Current Asset",
    RECEIVABLE: "Receivable",
    NON_CURRENT_LIABILITY: "Non Current Liability",
    CONTROL: "Control",
    CURRENT_LIABILITY: "Current Liability",
    PAYABLE: "Payable",
    EQUITY: "Equity",
    OPERATING_REVENUE: "Operating Revenue",
    OPERATING_EXPENSE: "Operating Expense",
    NON_OPERATING_REVENUE: "Non Operating Revenue",
    DIRECT_EXPENSE: "Direct Expense",
    OVERHEAD_EXPENSE: "Overhead Expense",
    OTHER_EXPENSE: "Other Expense",
    RECONCILIATION: "Reconciliation",
}

# Codes of an account type start right after its base offset.
ACCOUNT_CODE_BASES = {
    NON_CURRENT_ASSET: 0,
    CONTRA_ASSET: 300,
    INVENTORY: 400,
    BANK: 500,
    CURRENT_ASSET: 600,
    RECEIVABLE: 800,
    NON_CURRENT_LIABILITY: 1000,
    CONTROL: 1100,
    CURRENT_LIABILITY: 1200,
    PAYABLE: 2000,
    EQUITY: 3000,
    OPERATING_REVENUE: 4000,
    OPERATING_EXPENSE: 5000,
    NON_OPERATING_REVENUE: 6000,
    DIRECT_EXPENSE: 7000,
    OVERHEAD_EXPENSE: 8000,
    OTHER_EXPENSE: 9000,
    RECONCILIATION: 10000,
}

DEBIT = "D"
CREDIT = "C"
BALANCE_TYPES = (DEBIT, CREDIT)

TRANSACTION_TYPE_LABELS = {
    "CS": "Cash Sale",
    "IN": "Client Invoice",
    "CN": "Credit Note",
    "RC": "Client Receipt",
    "CP": "Cash Purchase",
    "BL": "Supplier Bill",
    "DN": "Debit Note",
    "PY": "Supplier Payment",
    "CE": "Contra Entry",
    "JN": "Journal Entry",
}


__all__ = [
    "ACCOUNT_TYPES",
    "PURCHASABLE_TYPES",
    "ACCOUNT_TYPE_LABELS",
    "ACCOUNT_CODE_BASES",
    "DEBIT",
    "CREDIT",
    "BALANCE_TYPES",
    "TRANSACTION_TYPE_LABELS",
    "NON_CURRENT_ASSET",
    "CONTRA_ASSET",
    "INVENTORY",
    "BANK",
    "CURRENT_ASSET",
    "RECEIVABLE",
    "NON_CURRENT_LIABILITY",
    "CONTROL",
    "CURRENT_LIABILITY",
    "PAYABLE",
    "EQUITY",
    "OPERATING_REVENUE",
    "OPERATING_EXPENSE",
    "NON_OPERATING_REVENUE",
    "DIRECT_EXPENSE",
    "OVERHEAD_EXPENSE",
    "OTHER_EXPENSE",
    "RECONCILIATION",
]
