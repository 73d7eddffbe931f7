from fastapi import FastAPI
import uvicorn

app = FastAPI()

DAILY_SERIES = {
    "2024-01-02": {"1. open": "100.0000", "2. high": "105.0000", "3. low": "99.0000", "4. close": "104.0000", "5. volume": "1000"},
    "2024-01-01": {"1. open": "98.0000", "2. high": "101.0000", "3. low": "97.0000", "4. close": "99.0000", "5. volume": "900"},
}

INTRADAY_SERIES = {
    "2024-01-02 09:31:00": {"1. open": "104.1000", "2. high": "104.3000", "3. low": "104.0000", "4. close": "104.2000", "5. volume": "310"},
    "2024-01-02 09:30:00": {"1. open": "104.0000", "2. high": "104.2000", "3. low": "103.9000", "4. close": "104.1000", "5. volume": "420"},
}

MONTHLY_SERIES = {
    "2024-01-31": {"1. open": "100.0000", "2. high": "120.0000", "3. low": "95.0000", "4. close": "110.0000", "5. volume": "25000"},
}

SERIES_BY_FUNCTION = {
    "TIME_SERIES_DAILY": ("Time Series (Daily)", DAILY_SERIES),
    "TIME_SERIES_INTRADAY": ("Time Series (1min)", INTRADAY_SERIES),
    "TIME_SERIES_MONTHLY": ("Monthly Time Series", MONTHLY_SERIES),
}


@app.get("/query")
async def query(function: str, symbol: str, apikey: str, interval: str = None, outputsize: str = "compact"):
    if symbol.upper() != "TSLA" or function not in SERIES_BY_FUNCTION:
        # The real API answers 200 with an error body for unknown symbols
        return {"Error Message": "Invalid API call. Please retry or visit the documentation for " + function + "."}

    series_key, series = SERIES_BY_FUNCTION[function]
    return {
        "Meta Data": {"1. Information": function, "2. Symbol": symbol.upper()},
        series_key: series,
    }


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8005)
