from datetime import date

from eurofx import EuroFx, FileSystemProvider, Period, SeriesLayout

print(EuroFx.__version__)  # 0.1.0

# Default usage downloads the documents from the ECB website
fx = EuroFx()

# Latest rates record
latest = fx.fetch_latest()
print(latest)
# => 2024-04-12: {'USD': 1.0656, 'JPY': 163.16, ..., 'EUR': 1.0}

print(latest.convert(100, "USD", "JPY"))
print(latest.convert_minor_units(12_345, "GBP", "EUR"))  # cents in, cents out

# Last 90 days, hashed by date
series = fx.fetch_time_series(Period.LAST_90_DAYS)
print(series.rates_on(date(2024, 4, 11)))

# Weekends and holidays have no record: average the nearest neighbours instead
print(series.approximate_rate("2024-04-07", "USD"))
print(series.convert_approximate("2024-04-07", 250, "USD", "CHF", day_range_limit=5))

# Whole history since 1999-01-04, sorted newest first
history = fx.fetch_time_series(Period.WHOLE, layout=SeriesLayout.ORDERED)
print(history.dates()[:5])
print(history.to_frame().tail())

fx.close()

# Offline usage with previously downloaded eurofxref-*.xml files
offline = EuroFx(FileSystemProvider.from_directory("~/Downloads/ecb"))
print(offline.fetch_hybrid_time_series().ingestion_dates[:3])
