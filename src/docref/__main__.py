from src.config.settings import INPUT_DIR, OUTPUT_DIR, REBASE_URL, REPORT_PATH
from src.docref.scan import run_rewrite, run_scan

# python -m src.docref
if __name__ == "__main__":
    result = run_scan(
        input_dir=INPUT_DIR,
        report_path=REPORT_PATH,
        include_links=True,
        include_styles=True,
        infect=True,
    )
    print(result)
    if REBASE_URL:
        print(run_rewrite(input_dir=INPUT_DIR, output_dir=OUTPUT_DIR, rebase_url=REBASE_URL))
