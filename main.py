from leasereport.report import run

if __name__ == "__main__":
    run()
