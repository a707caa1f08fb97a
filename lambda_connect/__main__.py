from lambda_connect.cli import app

if __name__ == "__main__":
    app()
