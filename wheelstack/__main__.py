from wheelstack.desktop import main

if __name__ == '__main__':
    main()
