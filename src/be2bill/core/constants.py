"""
Field names, operation codes and execution codes defined by the Be2bill API.

See https://developer.be2bill.com/annexes/parameters and
https://developer.be2bill.com/annexes/execcodes for the vendor reference.
"""

from __future__ import annotations

# Sent with every call so the server can check protocol compatibility.
API_VERSION = "2.0"

# Keys of the ``html_options`` mapping accepted by the form builders.
HTML_OPTION_FORM = "FORM"
HTML_OPTION_SUBMIT = "SUBMIT"

PARAM_3DSECURE = "3DSECURE"
PARAM_3DSECURE_DISPLAY_MODE = "3DSECUREDISPLAYMODE"
PARAM_ALIAS = "ALIAS"
PARAM_ALIAS_MODE = "ALIASMODE"
PARAM_AMOUNT = "AMOUNT"
PARAM_AMOUNTS = "AMOUNTS"
PARAM_BILLING_ADDRESS = "BILLINGADDRESS"
PARAM_BILLING_COUNTRY = "BILLINGCOUNTRY"
PARAM_BILLING_FIRST_NAME = "BILLINGFIRSTNAME"
PARAM_BILLING_LAST_NAME = "BILLINGLASTNAME"
PARAM_BILLING_PHONE = "BILLINGPHONE"
PARAM_BILLING_POSTAL_CODE = "BILLINGPOSTALCODE"
PARAM_CALLBACK_URL = "CALLBACKURL"
PARAM_CARD_CODE = "CARDCODE"
PARAM_CARD_CVV = "CARDCVV"
PARAM_CARD_FULL_NAME = "CARDFULLNAME"
PARAM_CARD_VALIDITY_DATE = "CARDVALIDITYDATE"
PARAM_CLIENT_ADDRESS = "CLIENTADDRESS"
PARAM_CLIENT_DOB = "CLIENTDOB"
PARAM_CLIENT_EMAIL = "CLIENTEMAIL"
PARAM_CLIENT_IDENT = "CLIENTIDENT"
PARAM_CLIENT_IP = "CLIENTIP"
PARAM_CLIENT_REFERRER = "CLIENTREFERRER"
PARAM_CLIENT_USER_AGENT = "CLIENTUSERAGENT"
PARAM_COMPRESSION = "COMPRESSION"
PARAM_CREATE_ALIAS = "CREATEALIAS"
PARAM_DATE = "DATE"
PARAM_DAY = "DAY"
PARAM_DESCRIPTION = "DESCRIPTION"
PARAM_DISPLAY_CREATE_ALIAS = "DISPLAYCREATEALIAS"
PARAM_END_DATE = "ENDDATE"
PARAM_EXTRA_DATA = "EXTRADATA"
PARAM_HASH = "HASH"
PARAM_HIDE_CARD_FULL_NAME = "HIDECARDFULLNAME"
PARAM_HIDE_CLIENT_EMAIL = "HIDECLIENTEMAIL"
PARAM_IDENTIFIER = "IDENTIFIER"
PARAM_LANGUAGE = "LANGUAGE"
PARAM_MAIL_TO = "MAILTO"
PARAM_METADATA = "METADATA"
PARAM_OPERATION_TYPE = "OPERATIONTYPE"
PARAM_ORDER_ID = "ORDERID"
PARAM_SCHEDULE_ID = "SCHEDULEID"
PARAM_SHIP_TO_ADDRESS = "SHIPTOADDRESS"
PARAM_SHIP_TO_COUNTRY = "SHIPTOCOUNTRY"
PARAM_SHIP_TO_FIRST_NAME = "SHIPTOFIRSTNAME"
PARAM_SHIP_TO_LAST_NAME = "SHIPTOLASTNAME"
PARAM_SHIP_TO_PHONE = "SHIPTOPHONE"
PARAM_SHIP_TO_POSTAL_CODE = "SHIPTOPOSTALCODE"
PARAM_START_DATE = "STARTDATE"
PARAM_TIME_ZONE = "TIMEZONE"
PARAM_TRANSACTION_ID = "TRANSACTIONID"
PARAM_VERSION = "VERSION"
PARAM_VME = "VME"

OPERATION_TYPE_AUTHORIZATION = "authorization"
OPERATION_TYPE_CAPTURE = "capture"
OPERATION_TYPE_CREDIT = "credit"
OPERATION_TYPE_PAYMENT = "payment"
OPERATION_TYPE_REFUND = "refund"
OPERATION_TYPE_STOP_N_TIMES = "stopntimes"
OPERATION_TYPE_GET_TRANSACTIONS = "getTransactions"
OPERATION_TYPE_EXPORT_TRANSACTIONS = "exportTransactions"
OPERATION_TYPE_EXPORT_CHARGEBACKS = "exportChargebacks"
OPERATION_TYPE_EXPORT_RECONCILIATION = "exportReconciliation"
OPERATION_TYPE_EXPORT_RECONCILED_TRANSACTIONS = "exportReconciledTransactions"

ALIAS_MODE_ONE_CLICK = "oneclick"
ALIAS_MODE_SUBSCRIPTION = "subscription"

COMPRESSION_ZIP = "ZIP"
COMPRESSION_GZIP = "GZIP"
COMPRESSION_BZIP = "BZIP"
COMPRESSION_FORMATS = (COMPRESSION_ZIP, COMPRESSION_GZIP, COMPRESSION_BZIP)

RESULT_PARAM_OPERATION_TYPE = "OPERATIONTYPE"
RESULT_PARAM_TRANSACTION_ID = "TRANSACTIONID"
RESULT_PARAM_EXEC_CODE = "EXECCODE"
RESULT_PARAM_MESSAGE = "MESSAGE"
RESULT_PARAM_DESCRIPTOR = "DESCRIPTOR"
RESULT_PARAM_AMOUNT = "AMOUNT"
RESULT_PARAM_REDIRECT_HTML = "REDIRECTHTML"

EXEC_CODE_SUCCESS = "0000"
EXEC_CODE_3DSECURE_REQUIRED = "0001"
EXEC_CODE_ALTERNATE_REDIRECT_REQUIRED = "0002"

EXEC_CODE_MISSING_PARAMETER = "1001"
EXEC_CODE_INVALID_PARAMETER = "1002"
EXEC_CODE_INVALID_HASH = "1003"
EXEC_CODE_UNSUPPORTED_PROTOCOL = "1004"

EXEC_CODE_ALIAS_NOT_FOUND = "2001"
EXEC_CODE_TRANSACTION_NOT_FOUND = "2002"
EXEC_CODE_UNSUCCESSFUL_TRANSACTION = "2003"
EXEC_CODE_TRANSACTION_NOT_REFUNDABLE = "2004"
EXEC_CODE_AUTHORIZATION_NOT_CAPTURABLE = "2005"
EXEC_CODE_INCOMPLETE_TRANSACTION = "2006"
EXEC_CODE_INVALID_CAPTURE_AMOUNT = "2007"
EXEC_CODE_INVALID_REFUND_AMOUNT = "2008"
EXEC_CODE_AUTHORIZATION_TIMEOUT = "2009"
EXEC_CODE_SCHEDULE_NOT_FOUND = "2010"
EXEC_CODE_INTERRUPTED_SCHEDULE = "2011"
EXEC_CODE_SCHEDULE_FINISHED = "2012"

EXEC_CODE_ACCOUNT_DEACTIVATED = "3001"
EXEC_CODE_UNAUTHORIZED_SERVER_IP = "3002"
EXEC_CODE_UNAUTHORIZED_TRANSACTION = "3003"

EXEC_CODE_TRANSACTION_REFUSED_BANK = "4001"
EXEC_CODE_INSUFFICIENT_FUNDS = "4002"
EXEC_CODE_CARD_REFUSED = "4003"
EXEC_CODE_TRANSACTION_ABANDONED = "4004"
EXEC_CODE_SUSPECTED_FRAUD = "4005"
EXEC_CODE_CARD_LOST = "4006"
EXEC_CODE_CARD_STOLEN = "4007"
EXEC_CODE_3DSECURE_AUTHENTICATION_FAILED = "4008"
EXEC_CODE_3DSECURE_AUTHENTICATION_TIMEOUT = "4009"
EXEC_CODE_INVALID_TRANSACTION = "4010"
EXEC_CODE_DUPLICATE_TRANSACTION = "4011"
EXEC_CODE_INVALID_CARD_DATA = "4012"
EXEC_CODE_TRANSACTION_NOT_AUTHORIZED = "4013"
EXEC_CODE_CARD_3DSECURE_NOT_SUPPORTED = "4014"
EXEC_CODE_TRANSACTION_TIMEOUT = "4015"
EXEC_CODE_TRANSACTION_REFUSED_BY_TERMINAL = "4016"

EXEC_CODE_EXCHANGE_PROTOCOL_ERROR = "5001"
EXEC_CODE_BANK_NETWORK_ERROR = "5002"
EXEC_CODE_HANDLER_TIMEOUT = "5004"
EXEC_CODE_3DSECURE_DISPLAY_ERROR = "5005"

EXEC_CODE_TRANSACTION_REFUSED_MERCHANT = "6001"
EXEC_CODE_TRANSACTION_REFUSED_UNKNOWN = "6002"
EXEC_CODE_TRANSACTION_CHALLENGED = "6003"
EXEC_CODE_TRANSACTION_REFUSED_MERCHANT_RULES = "6004"

DIRECTLINK_PATH = "/front/service/rest/process"
EXPORT_PATH = "/front/service/rest/export"
RECONCILIATION_PATH = "/front/service/rest/reconciliation"
FORM_PATH = "/front/form/process"

DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
