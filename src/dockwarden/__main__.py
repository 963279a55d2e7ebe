"""dockwardenのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    from dockwarden.cli import app

    app()
