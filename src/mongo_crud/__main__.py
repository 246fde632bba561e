from mongo_crud.main import run

run()
