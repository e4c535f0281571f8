from decimal import Decimal

from rating_refresh.task.types import TokenAmount

REFRESH_RATING_SIGNATURE = "refreshRatingWithReport(address,bytes)"

# Fee budget per intent, denominated in USD rather than the native gas token
DEFAULT_MAX_FEE = TokenAmount(denomination="USD", amount=Decimal("0.25"))

# (display name, key used by task inputs and environment variables)
TOKEN_SYMBOLS = [
    ("EURC", "eurc"),
    ("EURCV", "eurcv"),
    ("FDUSD", "fdusd"),
    ("GUSD", "gusd"),
    ("TUSD", "tusd"),
    ("USDe", "usde"),
    ("USDP", "usdp"),
    ("DAI", "dai"),
    ("USDT", "usdt"),
    ("USDC", "usdc"),
]

# RiskCheck(bytes32,uint8,uint8,uint8) emitted by the SARM hook
RISK_CHECK_TOPIC = "0x988b2889"

BASE_SEPOLIA_CHAIN_ID = 84532
