"""satexport Quickstart — turn TLE text into normalized records offline."""

from satexport import split_tle_blocks, transform_block

# ISS (ZARYA) and a geostationary Intelsat
tle_text = """
ISS (ZARYA)
1 25544U 98067A   24045.54896019  .00016717  00000-0  30093-3 0  9993
2 25544  51.6412 207.4925 0004948 290.5508 178.9792 15.49583488439596
INTELSAT 10-02
1 28358U 04022A   24045.51612782  .00000113  00000-0  00000+0 0  9996
2 28358   0.0153 243.6632 0002413 102.4376 263.1339  1.00271022 70130
""".strip()

launch_dates = {"25544": "1998-11-20"}

for name, line1, line2 in split_tle_blocks(tle_text):
    rec = transform_block("EXAMPLE", name, line1, line2, lambda nid: launch_dates.get(nid, "no data"))
    print(f"Satellite: {rec.satellite_name}")
    print(f"NORAD ID:  {rec.norad_id}")
    print(f"Launched:  {rec.launch_date}")
    print(f"Orbit:     {rec.type.value}")
    print()

# Full export (network access required):
# from satexport import ExportConfig, run
# records = run(ExportConfig(base_dir="."))
